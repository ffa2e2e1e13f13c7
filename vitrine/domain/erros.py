# vitrine/domain/erros.py
#
# Excecoes de dominio levantadas pelos services da camada de aplicacao.
# As rotas traduzem cada uma para um status HTTP (ver interfaces/api/main.py):
#   NaoEncontrado -> 404, AcessoNegado -> 403, Conflito -> 409,
#   DadosInvalidos -> 422.
from __future__ import annotations


class ErroDominio(Exception):
    """Base. A mensagem e exibida ao usuario final, sem detalhes internos."""


class NaoEncontrado(ErroDominio):
    pass


class AcessoNegado(ErroDominio):
    pass


class Conflito(ErroDominio):
    pass


class DadosInvalidos(ErroDominio):
    pass
