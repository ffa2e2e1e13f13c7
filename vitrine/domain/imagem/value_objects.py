# vitrine/domain/imagem/value_objects.py
#
# Regras de upload. A compressao acontece no navegador; aqui so garantimos
# que o que chegou respeita os alvos da compressao (tamanho e tipo).
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

_MB = 1024 * 1024


@dataclass(frozen=True)
class PoliticaImagem:
    max_bytes: int
    max_lado_px: int  # alvo da compressao no cliente, exposto para o formulario
    sufixo: str


LOGO = PoliticaImagem(max_bytes=_MB // 2, max_lado_px=400, sufixo="logo")
CAPA = PoliticaImagem(max_bytes=_MB, max_lado_px=1200, sufixo="cover")


class DestinoImagem(StrEnum):
    AGENTE_LOGO = "agent-logos"
    AGENTE_CAPA = "agent-covers"
    AGENCIA_LOGO = "agency-logos"
    AGENCIA_CAPA = "agency-covers"

    @property
    def politica(self) -> PoliticaImagem:
        return LOGO if self.value.endswith("-logos") else CAPA


def validar_imagem(destino: DestinoImagem, content_type: str, tamanho: int) -> None:
    """Levanta ValueError com mensagem para o usuario."""
    if not content_type.lower().startswith("image/"):
        raise ValueError("Por favor, selecione apenas arquivos de imagem")
    if tamanho <= 0:
        raise ValueError("Imagem vazia")
    if tamanho > destino.politica.max_bytes:
        limite_kb = destino.politica.max_bytes // 1024
        raise ValueError(f"Imagem excede o limite de {limite_kb} KB")


def chave_objeto(destino: DestinoImagem, user_id: str, instante_ms: int) -> str:
    """agency-logos/<user>/<epoch_ms>-logo.webp"""
    return f"{destino.value}/{user_id}/{instante_ms}-{destino.politica.sufixo}.webp"
