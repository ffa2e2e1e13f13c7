# vitrine/infrastructure/jwt_auth.py
#
# Decodes bearer tokens issued by the external auth provider (HS256, shared
# secret). Session lifecycle (login, refresh, logout) belongs to the provider;
# this module only answers "who is calling".
from __future__ import annotations

from dataclasses import dataclass

import jwt

from .config import get_settings


class TokenInvalido(Exception):
    pass


@dataclass(frozen=True)
class Ator:
    """Usuario autenticado. `id` e o claim `sub`, estavel entre sessoes."""
    id: str
    email: str | None = None


def decodificar_token(token: str) -> Ator:
    settings = get_settings()
    if not settings.jwt_secret:
        raise TokenInvalido("JWT_SECRET nao configurado")
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=["HS256"],
            audience=settings.jwt_audience,
        )
    except jwt.PyJWTError as err:
        raise TokenInvalido(str(err)) from err

    sub = claims.get("sub")
    if not sub:
        raise TokenInvalido("Token sem claim sub")
    email = claims.get("email")
    return Ator(id=str(sub), email=str(email) if email else None)
