# vitrine/domain/perfil/entities.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Perfil:
    """Perfil publico do usuario. id e o mesmo `sub` emitido pelo provedor de auth."""
    id: str
    username: str
    full_name: str | None = None
    avatar_url: str | None = None
    is_premium_user: bool = False

    @property
    def pode_verificar(self) -> bool:
        """Apenas usuarios premium moderam submissoes."""
        return self.is_premium_user


def username_de_email(email: str | None, fallback: str) -> str:
    """Parte local do e-mail; sem e-mail usa o fallback (id do usuario)."""
    if email and "@" in email:
        local = email.split("@", 1)[0].strip()
        if local:
            return local
    return fallback
