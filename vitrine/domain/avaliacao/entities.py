# vitrine/domain/avaliacao/entities.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from vitrine.domain.enums import TipoAlvo

_CAMPOS_CONHECIDOS = frozenset(
    {"id", "rating", "alvo_id", "user_id", "comentario", "criado_em", "autor"},
)


@dataclass(frozen=True)
class NotaAvaliacao:
    """Nota enviada por um usuario: inteiro de 1 a 5."""

    valor: int

    def __post_init__(self) -> None:
        if isinstance(self.valor, bool) or not isinstance(self.valor, int):
            raise ValueError("Nota deve ser um numero inteiro")
        if not 1 <= self.valor <= 5:
            raise ValueError("Nota deve estar entre 1 e 5")


@dataclass(frozen=True)
class Avaliacao:
    """Avaliacao de um usuario sobre um agente ou agencia.

    Somente leitura: criada pelo backend, nunca alterada por este servico.
    `rating` nao e validado aqui; registros antigos ou corrompidos podem
    trazer qualquer numero. Campos desconhecidos vindos do armazenamento
    ficam em `extras` (mapping somente-leitura).
    """

    rating: float
    alvo_tipo: TipoAlvo
    alvo_id: str
    user_id: str
    comentario: str = ""
    criado_em: datetime | None = None
    id: str | None = None
    autor: str | None = None
    extras: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, hash=False,
    )

    @classmethod
    def de_registro(cls, registro: Mapping[str, object], alvo_tipo: TipoAlvo) -> Avaliacao:
        """Hidrata a partir de uma linha do armazenamento (dict coluna -> valor)."""
        criado_em = registro.get("criado_em")
        return cls(
            rating=registro.get("rating"),  # type: ignore[arg-type]
            alvo_tipo=alvo_tipo,
            alvo_id=str(registro.get("alvo_id", "")),
            user_id=str(registro.get("user_id", "")),
            comentario=str(registro.get("comentario") or ""),
            criado_em=criado_em if isinstance(criado_em, datetime) else None,
            id=str(registro["id"]) if registro.get("id") is not None else None,
            autor=str(registro["autor"]) if registro.get("autor") else None,
            extras=MappingProxyType(
                {k: v for k, v in registro.items() if k not in _CAMPOS_CONHECIDOS},
            ),
        )
