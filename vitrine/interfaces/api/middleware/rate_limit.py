# vitrine/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time
from collections import defaultdict

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from vitrine.infrastructure.config import get_settings

# Leituras sao livres; so escritas (submissoes, avaliacoes, uploads) contam.
_METODOS_LIMITADOS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
_JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = defaultdict(list)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0 or request.method not in _METODOS_LIMITADOS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()

        # Limpar requests antigos
        self._requests[client_ip] = [t for t in self._requests[client_ip] if now - t < _JANELA_SEGUNDOS]

        if len(self._requests[client_ip]) >= limite:
            logger.warning("Rate limit excedido para {} em {} {}", client_ip, request.method, request.url.path)
            return Response(
                content='{"detail": "Muitas requisições. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
            )

        self._requests[client_ip].append(now)
        return await call_next(request)
