# vitrine/interfaces/api/routes/verificacao_routes.py
from typing import Literal

from fastapi import APIRouter, Depends

from vitrine.application.dtos.agencia_dto import AgenciaDetalheDTO
from vitrine.application.dtos.agente_dto import AgenteDetalheDTO
from vitrine.application.dtos.verificacao_dto import DecisaoDTO, PendentesDTO
from vitrine.application.services.verificacao_service import VerificacaoService
from vitrine.infrastructure.jwt_auth import Ator
from vitrine.interfaces.api.dependencies import get_ator, get_verificacao_service

router = APIRouter()


@router.get("/verificacoes", response_model=PendentesDTO)
def get_pendentes(
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: VerificacaoService = Depends(get_verificacao_service),  # noqa: B008
) -> PendentesDTO:
    return service.pendentes(ator.id)


@router.post("/verificacoes/{tipo}/{item_id}", response_model=AgenteDetalheDTO | AgenciaDetalheDTO)
def decidir(
    tipo: Literal["agente", "agencia"],
    item_id: str,
    decisao: DecisaoDTO,
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: VerificacaoService = Depends(get_verificacao_service),  # noqa: B008
) -> AgenteDetalheDTO | AgenciaDetalheDTO:
    return service.decidir(ator.id, tipo, item_id, decisao)
