# vitrine/application/services/comparacao_service.py
#
# Comparison selections, one per authenticated user. The EstadoComparacoes
# instance is created by the FastAPI lifespan and stored on app.state; routes
# receive it through a dependency. Nothing here is a module-level singleton.
#
# State is process-local and lost on restart: the selection is a browsing
# aid, not user data.
from __future__ import annotations

import threading

from vitrine.domain.comparacao.lista import ListaComparacao


class EstadoComparacoes:
    def __init__(self) -> None:
        self._listas: dict[str, ListaComparacao] = {}
        self._lock = threading.Lock()  # rotas sync rodam no threadpool

    def obter(self, user_id: str) -> ListaComparacao:
        with self._lock:
            return self._listas.get(user_id, ListaComparacao())

    def adicionar(self, user_id: str, agente_id: str) -> ListaComparacao:
        with self._lock:
            lista = self._listas.get(user_id, ListaComparacao()).adicionar(agente_id)
            self._listas[user_id] = lista
            return lista

    def remover(self, user_id: str, agente_id: str) -> ListaComparacao:
        with self._lock:
            lista = self._listas.get(user_id, ListaComparacao()).remover(agente_id)
            self._listas[user_id] = lista
            return lista

    def limpar(self, user_id: str) -> ListaComparacao:
        with self._lock:
            self._listas.pop(user_id, None)
            return ListaComparacao()
