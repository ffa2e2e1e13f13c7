# vitrine/domain/agente/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from vitrine.domain.enums import TipoPreco


@dataclass(frozen=True)
class NomeAgente:
    """Nome nao-vazio, trimado."""

    valor: str

    def __post_init__(self) -> None:
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Nome do agente nao pode ser vazio")
        object.__setattr__(self, "valor", stripped)


@dataclass(frozen=True)
class PrecoInicial:
    """Valor monetario em Decimal. Nunca negativo. Nunca float."""

    valor: Decimal

    def __post_init__(self) -> None:
        if self.valor < Decimal("0"):
            raise ValueError("Preco inicial nao pode ser negativo")


def normalizar_preco(tipo_preco: TipoPreco, preco: Decimal | None) -> PrecoInicial | None:
    """Agente gratuito nunca carrega preco, mesmo que o formulario envie um."""
    if tipo_preco is TipoPreco.GRATUITO or preco is None:
        return None
    return PrecoInicial(preco)


def formatar_preco(preco: PrecoInicial | None) -> str:
    """None -> "Gratuito"; Decimal("1234.5") -> "R$ 1.234,50"."""
    if preco is None:
        return "Gratuito"
    valor = preco.valor.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    em_ingles = f"{valor:,.2f}"  # 1,234.50
    return "R$ " + em_ingles.replace(",", "_").replace(".", ",").replace("_", ".")
