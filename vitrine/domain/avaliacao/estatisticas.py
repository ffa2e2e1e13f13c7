# vitrine/domain/avaliacao/estatisticas.py
#
# Pure core: reduces a collection of ratings to (media, total).
#
# Design decisions:
#   - Arithmetic is done in Decimal, converting floats through str(). The sum
#     is exact, so permuting the input never changes the result.
#   - Rounding is half-up at the first decimal place (4.45 -> 4.5), the same
#     convention users see in "4.5 estrelas".
#   - Values are not range-checked: a corrupted rating of 7 enters the mean.
#     Values that are not finite numbers (None, NaN, strings, booleans) are
#     skipped and do not count towards `total`.
#   - Every listing and detail view calls agregar_avaliacoes; no view computes
#     its own mean.
#
# Invariants:
#   - total == 0 <=> media is None.
#   - Never raises: non-iterable input counts as empty, overflow yields inf.
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, Overflow, localcontext
from typing import Protocol

_UMA_CASA = Decimal("0.1")


class TemNota(Protocol):
    @property
    def rating(self) -> object: ...


@dataclass(frozen=True)
class EstatisticaAvaliacao:
    """Media e quantidade de avaliacoes. Derivado, nunca persistido."""

    media: float | None
    total: int

    @property
    def media_exibicao(self) -> str:
        if self.media is None:
            return "Sem avaliações"
        return f"{self.media:.1f}"


SEM_AVALIACOES = EstatisticaAvaliacao(media=None, total=0)


def _como_decimal(nota: object) -> Decimal | None:
    if isinstance(nota, bool):
        return None
    if isinstance(nota, int):
        return Decimal(nota)
    if isinstance(nota, float):
        return Decimal(str(nota)) if math.isfinite(nota) else None
    if isinstance(nota, Decimal):
        return nota if nota.is_finite() else None
    return None


def _nota_de(avaliacao: object) -> object:
    if isinstance(avaliacao, Mapping):
        return avaliacao.get("rating")
    return getattr(avaliacao, "rating", None)


def agregar_avaliacoes(
    avaliacoes: Iterable[TemNota | Mapping[str, object]] | None,
) -> EstatisticaAvaliacao:
    """Reduz avaliacoes a (media arredondada em 1 casa, total).

    Aceita entidades com atributo `rating` ou registros simples
    (`{"rating": 5, ...}`). Entrada que nao e iteravel vale como vazia.
    """
    if avaliacoes is None or isinstance(avaliacoes, (str, bytes, Mapping)):
        return SEM_AVALIACOES
    try:
        iterador = iter(avaliacoes)
    except TypeError:
        return SEM_AVALIACOES

    notas = [d for d in (_como_decimal(_nota_de(a)) for a in iterador) if d is not None]
    if not notas:
        return SEM_AVALIACOES

    with localcontext() as ctx:
        ctx.prec = 60
        ctx.traps[Overflow] = False
        media = sum(notas, Decimal(0)) / len(notas)
        try:
            arredondada = media.quantize(_UMA_CASA, rounding=ROUND_HALF_UP)
        except ArithmeticError:
            # magnitude alem da precisao do contexto; casa decimal irrelevante
            arredondada = media
    return EstatisticaAvaliacao(media=float(arredondada), total=len(notas))
