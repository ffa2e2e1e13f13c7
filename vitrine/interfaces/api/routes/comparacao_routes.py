# vitrine/interfaces/api/routes/comparacao_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from vitrine.application.dtos.agente_dto import AgenteDetalheDTO
from vitrine.application.dtos.comparacao_dto import ListaComparacaoDTO
from vitrine.application.services.agente_service import AgenteService
from vitrine.application.services.comparacao_service import EstadoComparacoes
from vitrine.infrastructure.jwt_auth import Ator
from vitrine.interfaces.api.dependencies import (
    get_agente_service,
    get_ator,
    get_ator_opcional,
    get_estado_comparacoes,
)

router = APIRouter()


@router.get("/agentes/comparar", response_model=list[AgenteDetalheDTO])
def comparar_agentes(
    ids: str = Query(min_length=1, max_length=500),
    ator: Ator | None = Depends(get_ator_opcional),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> list[AgenteDetalheDTO]:
    lista = [i.strip() for i in ids.split(",") if i.strip()]
    return service.comparar(lista, ator.id if ator else None)


@router.get("/comparacao", response_model=ListaComparacaoDTO)
def get_lista(
    ator: Ator = Depends(get_ator),  # noqa: B008
    estado: EstadoComparacoes = Depends(get_estado_comparacoes),  # noqa: B008
) -> ListaComparacaoDTO:
    return ListaComparacaoDTO.from_domain(estado.obter(ator.id))


@router.post("/comparacao/{agente_id}", response_model=ListaComparacaoDTO)
def adicionar_agente(
    agente_id: str,
    ator: Ator = Depends(get_ator),  # noqa: B008
    estado: EstadoComparacoes = Depends(get_estado_comparacoes),  # noqa: B008
    service: AgenteService = Depends(get_agente_service),  # noqa: B008
) -> ListaComparacaoDTO:
    # Levanta NaoEncontrado para ids inexistentes ou invisiveis
    service.detalhe(agente_id, ator.id)
    antes = estado.obter(ator.id)
    if antes.cheia and agente_id not in antes.agentes:
        raise HTTPException(status_code=409, detail="Você pode comparar no máximo 3 agentes")
    return ListaComparacaoDTO.from_domain(estado.adicionar(ator.id, agente_id))


@router.delete("/comparacao/{agente_id}", response_model=ListaComparacaoDTO)
def remover_agente(
    agente_id: str,
    ator: Ator = Depends(get_ator),  # noqa: B008
    estado: EstadoComparacoes = Depends(get_estado_comparacoes),  # noqa: B008
) -> ListaComparacaoDTO:
    return ListaComparacaoDTO.from_domain(estado.remover(ator.id, agente_id))


@router.delete("/comparacao", response_model=ListaComparacaoDTO)
def limpar_lista(
    ator: Ator = Depends(get_ator),  # noqa: B008
    estado: EstadoComparacoes = Depends(get_estado_comparacoes),  # noqa: B008
) -> ListaComparacaoDTO:
    return ListaComparacaoDTO.from_domain(estado.limpar(ator.id))
