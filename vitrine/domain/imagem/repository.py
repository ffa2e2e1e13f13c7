# vitrine/domain/imagem/repository.py
from __future__ import annotations

from typing import Protocol


class ArmazenamentoImagens(Protocol):
    def enviar(self, chave: str, conteudo: bytes, content_type: str) -> str:
        """Envia o objeto e devolve a URL publica."""
        ...
