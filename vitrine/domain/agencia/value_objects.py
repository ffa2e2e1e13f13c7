# vitrine/domain/agencia/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass

_PESOS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_PESOS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_NAO_DIGITO = re.compile(r"[^0-9]")


def _digito_verificador(digitos: str, pesos: tuple[int, ...]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def normalizar_cnpj(raw: str) -> str:
    """Remove tudo que nao for digito decimal ASCII."""
    return _NAO_DIGITO.sub("", raw)


def validar_cnpj(raw: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ.

    Funcao total: qualquer entrada invalida (inclusive nao-str) retorna False,
    nunca levanta excecao.
    """
    if not isinstance(raw, str):
        return False
    digitos = normalizar_cnpj(raw)
    if len(digitos) != 14:
        return False
    if len(set(digitos)) == 1:
        return False
    if int(digitos[12]) != _digito_verificador(digitos[:12], _PESOS_1):
        return False
    return int(digitos[13]) == _digito_verificador(digitos[:13], _PESOS_2)


def mascarar_cnpj(parcial: str) -> str:
    """Mascara progressiva para CNPJ digitado pela metade.

    "112223" -> "11.222.3"; digitos alem do 14o sao descartados.
    """
    d = normalizar_cnpj(parcial)[:14]
    partes = [d[:2]]
    if len(d) > 2:
        partes.append("." + d[2:5])
    if len(d) > 5:
        partes.append("." + d[5:8])
    if len(d) > 8:
        partes.append("/" + d[8:12])
    if len(d) > 12:
        partes.append("-" + d[12:])
    return "".join(partes)


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        if not validar_cnpj(raw):
            raise ValueError(f"CNPJ invalido: {raw!r}")
        object.__setattr__(self, "_valor", normalizar_cnpj(raw))

    @classmethod
    def armazenado(cls, raw: str) -> CNPJ:
        """Reconstroi um CNPJ ja persistido sem revalidar os digitos.

        Linhas antigas ou gravadas por fora da API podem ter digito
        verificador errado; ler essas linhas nao deve derrubar listagens.
        """
        cnpj = object.__new__(cls)
        object.__setattr__(cnpj, "_valor", normalizar_cnpj(raw))
        return cnpj

    @property
    def valido(self) -> bool:
        return validar_cnpj(self._valor)

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        return mascarar_cnpj(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class NomeAgencia:
    """Nome nao-vazio, trimado."""

    valor: str

    def __post_init__(self) -> None:
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Nome da agencia nao pode ser vazio")
        object.__setattr__(self, "valor", stripped)


ESPECIALIDADES: tuple[str, ...] = (
    "Assistentes Virtuais",
    "Atendimento ao Cliente",
    "Automação de Tarefas",
    "Criação de Conteúdo",
    "Análise de Dados",
    "Tradução e Idiomas",
    "Edição de Imagens",
    "Transcrição de Áudio",
    "Pesquisa e Relatórios",
    "Suporte Empresarial",
    "Marketing Digital",
    "Educação e Treinamento",
    "Outros",
)
