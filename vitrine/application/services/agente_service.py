# vitrine/application/services/agente_service.py
from __future__ import annotations

import uuid
from dataclasses import replace

from loguru import logger

from vitrine.domain.agente.entities import Agente
from vitrine.domain.agente.filtros import (
    FiltroMarketplace,
    filtrar_agentes,
    filtrar_categorias,
    ordenar_ranking,
)
from vitrine.domain.agente.repository import AgenteRepository
from vitrine.domain.agente.value_objects import NomeAgente, normalizar_preco
from vitrine.domain.avaliacao.entities import NotaAvaliacao
from vitrine.domain.avaliacao.repository import AvaliacaoRepository
from vitrine.domain.comparacao.lista import MAX_AGENTES
from vitrine.domain.enums import StatusVerificacao, TipoAlvo
from vitrine.domain.erros import AcessoNegado, DadosInvalidos, NaoEncontrado

from ..dtos.agente_dto import AgenteDetalheDTO, AgenteFormDTO, AgenteResumoDTO
from ..dtos.avaliacao_dto import AvaliacaoDTO, NovaAvaliacaoDTO
from .estatisticas import com_estatisticas_agentes

QTD_DESTAQUES = 4


class AgenteService:
    """Imperative Shell: busca agentes e avaliacoes, delega filtros e medias ao core puro."""

    def __init__(self, agente_repo: AgenteRepository, avaliacao_repo: AvaliacaoRepository) -> None:
        self._agente_repo = agente_repo
        self._avaliacao_repo = avaliacao_repo

    # ---------- leitura ----------

    def marketplace(self, filtro: FiltroMarketplace) -> list[AgenteResumoDTO]:
        aprovados = self._agente_repo.listar_por_status(StatusVerificacao.APROVADO)
        agentes = com_estatisticas_agentes(aprovados, self._avaliacao_repo)
        return [AgenteResumoDTO.from_domain(a) for a in filtrar_agentes(agentes, filtro)]

    def destaques(self) -> list[AgenteResumoDTO]:
        recentes = self._agente_repo.listar_recentes(StatusVerificacao.APROVADO, QTD_DESTAQUES)
        return [AgenteResumoDTO.from_domain(a) for a in com_estatisticas_agentes(recentes, self._avaliacao_repo)]

    def ranking(self, categorias: list[str]) -> list[AgenteResumoDTO]:
        aprovados = self._agente_repo.listar_por_status(StatusVerificacao.APROVADO)
        agentes = ordenar_ranking(com_estatisticas_agentes(aprovados, self._avaliacao_repo))
        return [AgenteResumoDTO.from_domain(a) for a in filtrar_categorias(agentes, categorias)]

    def comparar(self, ids: list[str], ator_id: str | None) -> list[AgenteDetalheDTO]:
        unicos = list(dict.fromkeys(ids))
        if not unicos or len(unicos) > MAX_AGENTES:
            raise DadosInvalidos(f"Informe de 1 a {MAX_AGENTES} agentes para comparar")
        visiveis = [a for a in self._agente_repo.listar_por_ids(unicos) if a.visivel_para(ator_id)]
        if not visiveis:
            raise NaoEncontrado("Nenhum agente encontrado para comparação")
        return [AgenteDetalheDTO.from_domain(a) for a in com_estatisticas_agentes(visiveis, self._avaliacao_repo)]

    def detalhe(self, agente_id: str, ator_id: str | None) -> AgenteDetalheDTO:
        agente = self._buscar_visivel(agente_id, ator_id)
        [agente] = com_estatisticas_agentes([agente], self._avaliacao_repo)
        return AgenteDetalheDTO.from_domain(agente)

    def avaliacoes(self, agente_id: str, ator_id: str | None) -> list[AvaliacaoDTO]:
        self._buscar_visivel(agente_id, ator_id)
        return [
            AvaliacaoDTO.from_domain(a)
            for a in self._avaliacao_repo.listar_por_alvo(TipoAlvo.AGENTE, agente_id)
        ]

    # ---------- escrita ----------

    def avaliar(self, agente_id: str, ator_id: str, dados: NovaAvaliacaoDTO) -> AvaliacaoDTO:
        self._buscar_visivel(agente_id, ator_id)
        try:
            nota = NotaAvaliacao(dados.rating)
        except ValueError as err:
            raise DadosInvalidos(str(err)) from err
        avaliacao = self._avaliacao_repo.inserir(
            TipoAlvo.AGENTE, agente_id, ator_id, nota, dados.comentario.strip(),
        )
        logger.info("Avaliacao {} registrada para agente {}", avaliacao.id, agente_id)
        return AvaliacaoDTO.from_domain(avaliacao)

    def submeter(self, ator_id: str, dados: AgenteFormDTO) -> AgenteDetalheDTO:
        """Todo agente novo entra como pendente e so aparece apos aprovacao."""
        agente = self._montar(str(uuid.uuid4()), ator_id, dados)
        salvo = self._agente_repo.inserir(agente)
        logger.info("Agente {} submetido por {}", salvo.id, ator_id)
        return AgenteDetalheDTO.from_domain(salvo)

    def editar(self, agente_id: str, ator_id: str, dados: AgenteFormDTO) -> AgenteDetalheDTO:
        atual = self._buscar_do_dono(agente_id, ator_id)
        novo = self._montar(atual.id, ator_id, dados)
        editado = replace(
            atual,
            nome=novo.nome,
            descricao=novo.descricao,
            website_url=novo.website_url,
            tipo_preco=novo.tipo_preco,
            preco_inicial=novo.preco_inicial,
            categoria=novo.categoria,
            image_url=novo.image_url,
            cover_url=novo.cover_url,
        )
        salvo = self._agente_repo.atualizar(editado)
        [salvo] = com_estatisticas_agentes([salvo], self._avaliacao_repo)
        return AgenteDetalheDTO.from_domain(salvo)

    def remover(self, agente_id: str, ator_id: str) -> None:
        self._buscar_do_dono(agente_id, ator_id)
        self._agente_repo.remover(agente_id)
        logger.info("Agente {} removido pelo dono", agente_id)

    # ---------- auxiliares ----------

    def _buscar_visivel(self, agente_id: str, ator_id: str | None) -> Agente:
        agente = self._agente_repo.buscar_por_id(agente_id)
        if agente is None or not agente.visivel_para(ator_id):
            raise NaoEncontrado("Agente não encontrado")
        return agente

    def _buscar_do_dono(self, agente_id: str, ator_id: str) -> Agente:
        agente = self._agente_repo.buscar_por_id(agente_id)
        if agente is None:
            raise NaoEncontrado("Agente não encontrado")
        if agente.user_id != ator_id:
            raise AcessoNegado("Apenas o autor pode alterar este agente")
        return agente

    @staticmethod
    def _montar(agente_id: str, ator_id: str, dados: AgenteFormDTO) -> Agente:
        try:
            return Agente(
                id=agente_id,
                nome=NomeAgente(dados.nome),
                descricao=dados.descricao.strip(),
                categoria=dados.categoria,
                tipo_preco=dados.tipo_preco,
                preco_inicial=normalizar_preco(dados.tipo_preco, dados.preco_inicial),
                website_url=dados.website_url.strip(),
                image_url=dados.image_url,
                cover_url=dados.cover_url,
                user_id=ator_id,
                status=StatusVerificacao.PENDENTE,
            )
        except ValueError as err:
            raise DadosInvalidos(str(err)) from err
