# vitrine/infrastructure/storage_client.py
#
# Object storage client for the hosted storage REST API.
#
# Design decisions:
#   - One POST per object, no retry: a failed upload is reported to the user,
#     who resubmits the form.
#   - Objects are written with x-upsert so resubmitting the same key replaces
#     the previous file instead of failing.
#   - The httpx.Client is injectable so tests can plug an httpx.MockTransport.
#
# Invariants:
#   - The returned URL is always {base}/storage/v1/object/public/{bucket}/{chave}.
#   - The service key is sent only in headers and never logged.
from __future__ import annotations

import httpx
from loguru import logger

from .config import get_settings


class ArmazenamentoNaoConfigurado(RuntimeError):
    pass


class HttpxArmazenamento:
    def __init__(
        self,
        base_url: str,
        bucket: str,
        api_key: str,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not base_url:
            raise ArmazenamentoNaoConfigurado("STORAGE_URL nao configurado")
        self._base_url = base_url.rstrip("/")
        self._bucket = bucket
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout)

    def url_publica(self, chave: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{self._bucket}/{chave}"

    def enviar(self, chave: str, conteudo: bytes, content_type: str) -> str:
        """Raises:
            httpx.HTTPError: falha de rede ou status >= 400 do storage.
        """
        response = self._client.post(
            f"{self._base_url}/storage/v1/object/{self._bucket}/{chave}",
            content=conteudo,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "apikey": self._api_key,
                "Content-Type": content_type,
                "x-upsert": "true",
            },
        )
        response.raise_for_status()
        logger.info("Imagem enviada: {} ({} bytes)", chave, len(conteudo))
        return self.url_publica(chave)


def criar_armazenamento() -> HttpxArmazenamento:
    settings = get_settings()
    return HttpxArmazenamento(
        base_url=settings.storage_url,
        bucket=settings.storage_bucket,
        api_key=settings.storage_api_key,
        timeout=settings.storage_timeout,
    )
