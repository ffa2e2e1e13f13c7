# vitrine/interfaces/api/routes/imagem_routes.py
from fastapi import APIRouter, Depends, Header, Request
from starlette.concurrency import run_in_threadpool

from vitrine.application.dtos.imagem_dto import ImagemEnviadaDTO
from vitrine.application.services.imagem_service import ImagemService
from vitrine.domain.imagem.value_objects import DestinoImagem
from vitrine.infrastructure.jwt_auth import Ator
from vitrine.interfaces.api.dependencies import get_ator, get_imagem_service

router = APIRouter()


@router.put("/imagens/{destino}", response_model=ImagemEnviadaDTO, status_code=201)
async def enviar_imagem(
    destino: DestinoImagem,
    request: Request,
    content_type: str = Header(default=""),
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: ImagemService = Depends(get_imagem_service),  # noqa: B008
) -> ImagemEnviadaDTO:
    """Corpo cru: a imagem ja chega comprimida (webp) do cliente."""
    conteudo = await request.body()
    # upload httpx e sincrono
    return await run_in_threadpool(service.enviar, ator.id, destino, content_type, conteudo)
