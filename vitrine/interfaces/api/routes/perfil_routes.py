# vitrine/interfaces/api/routes/perfil_routes.py
from fastapi import APIRouter, Depends

from vitrine.application.dtos.perfil_dto import PainelPerfilDTO
from vitrine.application.services.perfil_service import PerfilService
from vitrine.infrastructure.jwt_auth import Ator
from vitrine.interfaces.api.dependencies import get_ator, get_perfil_service

router = APIRouter()


@router.get("/perfil", response_model=PainelPerfilDTO)
def get_perfil(
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: PerfilService = Depends(get_perfil_service),  # noqa: B008
) -> PainelPerfilDTO:
    return service.painel(ator.id, ator.email)
