# vitrine/interfaces/api/routes/ranking_routes.py
from fastapi import APIRouter, Depends, Query

from vitrine.application.dtos.agente_dto import AgenteResumoDTO
from vitrine.application.services.agente_service import AgenteService
from vitrine.interfaces.api.dependencies import get_agente_service

router = APIRouter()


@router.get("/agentes/ranking", response_model=list[AgenteResumoDTO])
def get_ranking(
    categoria: list[str] = Query(default=[]),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> list[AgenteResumoDTO]:
    return service.ranking(categoria)


@router.get("/agentes/destaques", response_model=list[AgenteResumoDTO])
def get_destaques(
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> list[AgenteResumoDTO]:
    return service.destaques()
