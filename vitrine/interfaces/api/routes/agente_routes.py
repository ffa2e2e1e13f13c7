# vitrine/interfaces/api/routes/agente_routes.py
from fastapi import APIRouter, Depends, Query, Response

from vitrine.application.dtos.agente_dto import AgenteDetalheDTO, AgenteFormDTO, AgenteResumoDTO
from vitrine.application.dtos.avaliacao_dto import AvaliacaoDTO, NovaAvaliacaoDTO
from vitrine.application.services.agente_service import AgenteService
from vitrine.domain.agente.filtros import FiltroMarketplace
from vitrine.domain.enums import Categoria, TipoPreco
from vitrine.infrastructure.jwt_auth import Ator
from vitrine.interfaces.api.dependencies import (
    get_agente_service,
    get_ator,
    get_ator_opcional,
    get_ator_registrado,
)

router = APIRouter()


@router.get("/agentes", response_model=list[AgenteResumoDTO])
def get_marketplace(
    q: str = Query(default="", max_length=200),
    categoria: list[Categoria] = Query(default=[]),  # noqa: B008
    tipo_preco: list[TipoPreco] = Query(default=[]),  # noqa: B008
    nota_minima: float | None = Query(default=None, ge=0, le=5),
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> list[AgenteResumoDTO]:
    filtro = FiltroMarketplace(
        busca=q,
        categorias=frozenset(c.value for c in categoria),
        tipos_preco=frozenset(t.value for t in tipo_preco),
        nota_minima=nota_minima,
    )
    return service.marketplace(filtro)


@router.post("/agentes", response_model=AgenteDetalheDTO, status_code=201)
def submeter_agente(
    dados: AgenteFormDTO,
    ator: Ator = Depends(get_ator_registrado),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> AgenteDetalheDTO:
    return service.submeter(ator.id, dados)


@router.get("/agentes/{agente_id}", response_model=AgenteDetalheDTO)
def get_agente(
    agente_id: str,
    ator: Ator | None = Depends(get_ator_opcional),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> AgenteDetalheDTO:
    return service.detalhe(agente_id, ator.id if ator else None)


@router.put("/agentes/{agente_id}", response_model=AgenteDetalheDTO)
def editar_agente(
    agente_id: str,
    dados: AgenteFormDTO,
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> AgenteDetalheDTO:
    return service.editar(agente_id, ator.id, dados)


@router.delete("/agentes/{agente_id}", status_code=204)
def remover_agente(
    agente_id: str,
    ator: Ator = Depends(get_ator),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> Response:
    service.remover(agente_id, ator.id)
    return Response(status_code=204)


@router.get("/agentes/{agente_id}/avaliacoes", response_model=list[AvaliacaoDTO])
def get_avaliacoes_agente(
    agente_id: str,
    ator: Ator | None = Depends(get_ator_opcional),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> list[AvaliacaoDTO]:
    return service.avaliacoes(agente_id, ator.id if ator else None)


@router.post("/agentes/{agente_id}/avaliacoes", response_model=AvaliacaoDTO, status_code=201)
def avaliar_agente(
    agente_id: str,
    dados: NovaAvaliacaoDTO,
    ator: Ator = Depends(get_ator_registrado),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> AvaliacaoDTO:
    return service.avaliar(agente_id, ator.id, dados)
