# vitrine/interfaces/api/dependencies.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vitrine.application.services.agencia_service import AgenciaService
from vitrine.application.services.agente_service import AgenteService
from vitrine.application.services.comparacao_service import EstadoComparacoes
from vitrine.application.services.imagem_service import ImagemService
from vitrine.application.services.perfil_service import PerfilService
from vitrine.application.services.verificacao_service import VerificacaoService
from vitrine.domain.imagem.repository import ArmazenamentoImagens
from vitrine.infrastructure.duckdb_connection import get_connection
from vitrine.infrastructure.jwt_auth import Ator, TokenInvalido, decodificar_token
from vitrine.infrastructure.repositories.duckdb_agencia_repo import DuckDBAgenciaRepo
from vitrine.infrastructure.repositories.duckdb_agente_repo import DuckDBAgenteRepo
from vitrine.infrastructure.repositories.duckdb_avaliacao_repo import DuckDBAvaliacaoRepo
from vitrine.infrastructure.repositories.duckdb_perfil_repo import DuckDBPerfilRepo

_bearer = HTTPBearer(auto_error=False)


def get_cursor() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Um cursor por request: a conexao DuckDB nao e thread-safe, cursores sao."""
    cursor = get_connection().cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def get_ator_opcional(
    credenciais: HTTPAuthorizationCredentials | None = Depends(_bearer),  # noqa: B008
) -> Ator | None:
    if credenciais is None:
        return None
    try:
        return decodificar_token(credenciais.credentials)
    except TokenInvalido as err:
        raise HTTPException(
            status_code=401,
            detail="Sessão inválida ou expirada",
            headers={"WWW-Authenticate": "Bearer"},
        ) from err


def get_ator(ator: Ator | None = Depends(get_ator_opcional)) -> Ator:  # noqa: B008
    if ator is None:
        raise HTTPException(
            status_code=401,
            detail="Você precisa estar logado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return ator


def get_agente_service(conn: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> AgenteService:  # noqa: B008
    return AgenteService(agente_repo=DuckDBAgenteRepo(conn), avaliacao_repo=DuckDBAvaliacaoRepo(conn))


def get_agencia_service(conn: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> AgenciaService:  # noqa: B008
    return AgenciaService(agencia_repo=DuckDBAgenciaRepo(conn), avaliacao_repo=DuckDBAvaliacaoRepo(conn))


def get_verificacao_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> VerificacaoService:
    return VerificacaoService(
        perfil_repo=DuckDBPerfilRepo(conn),
        agente_repo=DuckDBAgenteRepo(conn),
        agencia_repo=DuckDBAgenciaRepo(conn),
    )


def get_perfil_service(conn: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> PerfilService:  # noqa: B008
    return PerfilService(
        perfil_repo=DuckDBPerfilRepo(conn),
        agente_repo=DuckDBAgenteRepo(conn),
        agencia_repo=DuckDBAgenciaRepo(conn),
        avaliacao_repo=DuckDBAvaliacaoRepo(conn),
    )


def get_estado_comparacoes(request: Request) -> EstadoComparacoes:
    return request.app.state.comparacoes  # type: ignore[no-any-return]


def get_imagem_service(request: Request) -> ImagemService:
    armazenamento: ArmazenamentoImagens | None = getattr(request.app.state, "armazenamento", None)
    if armazenamento is None:
        raise HTTPException(status_code=503, detail="Armazenamento de imagens indisponível")
    return ImagemService(armazenamento)


def get_ator_registrado(
    ator: Ator = Depends(get_ator),  # noqa: B008
    perfis: PerfilService = Depends(get_perfil_service),  # noqa: B008
) -> Ator:
    """Escritas exigem perfil: autoria de avaliacoes e submissoes vem dele."""
    perfis.obter_ou_criar(ator.id, ator.email)
    return ator
