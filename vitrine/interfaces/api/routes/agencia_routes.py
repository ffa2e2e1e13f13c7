# vitrine/interfaces/api/routes/agencia_routes.py
from fastapi import APIRouter, Depends, Query, Response

from vitrine.application.dtos.agencia_dto import AgenciaDetalheDTO, AgenciaFormDTO, AgenciaResumoDTO
from vitrine.application.dtos.avaliacao_dto import AvaliacaoDTO, NovaAvaliacaoDTO
from vitrine.application.services.agencia_service import AgenciaService
from vitrine.domain.agencia.filtros import FiltroAgencias
from vitrine.infrastructure.jwt_auth import Ator
from vitrine.interfaces.api.dependencies import (
    get_agencia_service,
    get_ator,
    get_ator_opcional,
    get_ator_registrado,
)

router = APIRouter()


@router.get("/agencias", response_model=list[AgenciaResumoDTO])
def get_diretorio(
    q: str = Query(default="", max_length=200),
    especialidade: list[str] = Query(default=[]),  # noqa: B008
    min_clientes: int | None = Query(default=None, ge=0),
    somente_verificadas: bool = Query(default=False),
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> list[AgenciaResumoDTO]:
    filtro = FiltroAgencias(
        busca=q,
        especialidades=frozenset(especialidade),
        min_clientes=min_clientes,
        somente_verificadas=somente_verificadas,
    )
    return service.diretorio(filtro)


@router.post("/agencias", response_model=AgenciaDetalheDTO, status_code=201)
def submeter_agencia(
    dados: AgenciaFormDTO,
    ator: Ator = Depends(get_ator_registrado),  # noqa: B008
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> AgenciaDetalheDTO:
    return service.submeter(ator.id, dados)


@router.get("/agencias/{agencia_id}", response_model=AgenciaDetalheDTO)
def get_agencia(
    agencia_id: str,
    ator: Ator | None = Depends(get_ator_opcional),  # noqa: B008
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> AgenciaDetalheDTO:
    return service.detalhe(agencia_id, ator.id if ator else None)


@router.put("/agencias/{agencia_id}", response_model=AgenciaDetalheDTO)
def editar_agencia(
    agencia_id: str,
    dados: AgenciaFormDTO,
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> AgenciaDetalheDTO:
    return service.editar(agencia_id, ator.id, dados)


@router.delete("/agencias/{agencia_id}", status_code=204)
def remover_agencia(
    agencia_id: str,
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> Response:
    service.remover(agencia_id, ator.id)
    return Response(status_code=204)


@router.get("/agencias/{agencia_id}/avaliacoes", response_model=list[AvaliacaoDTO])
def get_avaliacoes_agencia(
    agencia_id: str,
    ator: Ator | None = Depends(get_ator_opcional),  # noqa: B008
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> list[AvaliacaoDTO]:
    return service.avaliacoes(agencia_id, ator.id if ator else None)


@router.post("/agencias/{agencia_id}/avaliacoes", response_model=AvaliacaoDTO, status_code=201)
def avaliar_agencia(
    agencia_id: str,
    dados: NovaAvaliacaoDTO,
    ator: Ator = Depends(get_ator_registrado),  # noqa: B008
    service: AgenciaService = Depends(get_agencia_service),  # noqa: B008
) -> AvaliacaoDTO:
    return service.avaliar(agencia_id, ator.id, dados)
