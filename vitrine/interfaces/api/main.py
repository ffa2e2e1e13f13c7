# vitrine/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from vitrine.application.services.comparacao_service import EstadoComparacoes
from vitrine.domain.erros import AcessoNegado, Conflito, DadosInvalidos, ErroDominio, NaoEncontrado
from vitrine.infrastructure.config import get_settings
from vitrine.interfaces.api.middleware.rate_limit import RateLimitMiddleware

_STATUS_POR_ERRO: dict[type[ErroDominio], int] = {
    NaoEncontrado: 404,
    AcessoNegado: 403,
    Conflito: 409,
    DadosInvalidos: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from vitrine.infrastructure.duckdb_connection import get_connection
    from vitrine.infrastructure.logging_config import configurar_logging
    from vitrine.infrastructure.storage_client import ArmazenamentoNaoConfigurado, criar_armazenamento

    configurar_logging()
    get_connection()  # valida conexao no startup
    app.state.comparacoes = EstadoComparacoes()
    if getattr(app.state, "armazenamento", None) is None:
        try:
            app.state.armazenamento = criar_armazenamento()
        except ArmazenamentoNaoConfigurado:
            logger.warning("STORAGE_URL ausente: upload de imagens desabilitado")
            app.state.armazenamento = None
    logger.info("Vitrine API iniciada")
    yield


settings = get_settings()

app = FastAPI(
    title="Vitrine de Agentes API",
    debug=settings.debug,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.exception_handler(ErroDominio)
async def tratar_erro_dominio(request: Request, exc: ErroDominio) -> JSONResponse:
    status = next((s for tipo, s in _STATUS_POR_ERRO.items() if isinstance(exc, tipo)), 400)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


@app.exception_handler(httpx.HTTPError)
async def tratar_erro_storage(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    logger.error("Falha no storage em {}: {}", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": "Falha ao enviar imagem. Tente novamente."})


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Routers: ranking e comparacao ANTES de agente (/agentes/ranking, /agentes/comparar vs /agentes/{agente_id})
from vitrine.interfaces.api.routes.agencia_routes import router as agencia_router  # noqa: E402
from vitrine.interfaces.api.routes.agente_routes import router as agente_router  # noqa: E402
from vitrine.interfaces.api.routes.cnpj_routes import router as cnpj_router  # noqa: E402
from vitrine.interfaces.api.routes.comparacao_routes import router as comparacao_router  # noqa: E402
from vitrine.interfaces.api.routes.imagem_routes import router as imagem_router  # noqa: E402
from vitrine.interfaces.api.routes.perfil_routes import router as perfil_router  # noqa: E402
from vitrine.interfaces.api.routes.ranking_routes import router as ranking_router  # noqa: E402
from vitrine.interfaces.api.routes.verificacao_routes import router as verificacao_router  # noqa: E402

app.include_router(ranking_router, prefix="/api")
app.include_router(comparacao_router, prefix="/api")
app.include_router(agente_router, prefix="/api")
app.include_router(agencia_router, prefix="/api")
app.include_router(cnpj_router, prefix="/api")
app.include_router(verificacao_router, prefix="/api")
app.include_router(perfil_router, prefix="/api")
app.include_router(imagem_router, prefix="/api")
