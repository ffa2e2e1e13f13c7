# vitrine/application/services/imagem_service.py
from __future__ import annotations

import time
from collections.abc import Callable

from vitrine.domain.erros import DadosInvalidos
from vitrine.domain.imagem.repository import ArmazenamentoImagens
from vitrine.domain.imagem.value_objects import DestinoImagem, chave_objeto, validar_imagem

from ..dtos.imagem_dto import ImagemEnviadaDTO


def _agora_ms() -> int:
    return int(time.time() * 1000)


class ImagemService:
    def __init__(
        self,
        armazenamento: ArmazenamentoImagens,
        relogio_ms: Callable[[], int] = _agora_ms,
    ) -> None:
        self._armazenamento = armazenamento
        self._relogio_ms = relogio_ms

    def enviar(
        self, ator_id: str, destino: DestinoImagem, content_type: str, conteudo: bytes,
    ) -> ImagemEnviadaDTO:
        """Raises:
            DadosInvalidos: tipo nao-imagem ou acima do limite do destino.
            httpx.HTTPError: falha do storage (propagada; a rota responde 502).
        """
        try:
            validar_imagem(destino, content_type, len(conteudo))
        except ValueError as err:
            raise DadosInvalidos(str(err)) from err
        chave = chave_objeto(destino, ator_id, self._relogio_ms())
        url = self._armazenamento.enviar(chave, conteudo, content_type)
        return ImagemEnviadaDTO(chave=chave, url=url)
