# vitrine/application/services/agencia_service.py
from __future__ import annotations

import uuid
from dataclasses import replace

from loguru import logger

from vitrine.domain.agencia.entities import Agencia
from vitrine.domain.agencia.filtros import FiltroAgencias, filtrar_agencias
from vitrine.domain.agencia.repository import AgenciaRepository
from vitrine.domain.agencia.value_objects import CNPJ, ESPECIALIDADES, NomeAgencia
from vitrine.domain.avaliacao.entities import NotaAvaliacao
from vitrine.domain.avaliacao.repository import AvaliacaoRepository
from vitrine.domain.enums import StatusVerificacao, TipoAlvo
from vitrine.domain.erros import AcessoNegado, Conflito, DadosInvalidos, NaoEncontrado

from ..dtos.agencia_dto import AgenciaDetalheDTO, AgenciaFormDTO, AgenciaResumoDTO
from ..dtos.avaliacao_dto import AvaliacaoDTO, NovaAvaliacaoDTO
from .estatisticas import com_estatisticas_agencias


class AgenciaService:
    def __init__(self, agencia_repo: AgenciaRepository, avaliacao_repo: AvaliacaoRepository) -> None:
        self._agencia_repo = agencia_repo
        self._avaliacao_repo = avaliacao_repo

    def diretorio(self, filtro: FiltroAgencias) -> list[AgenciaResumoDTO]:
        """So aprovadas, mais clientes primeiro (ordem vem do repo)."""
        aprovadas = self._agencia_repo.listar_por_status(StatusVerificacao.APROVADO)
        agencias = com_estatisticas_agencias(filtrar_agencias(aprovadas, filtro), self._avaliacao_repo)
        return [AgenciaResumoDTO.from_domain(a) for a in agencias]

    def detalhe(self, agencia_id: str, ator_id: str | None) -> AgenciaDetalheDTO:
        agencia = self._buscar_visivel(agencia_id, ator_id)
        [agencia] = com_estatisticas_agencias([agencia], self._avaliacao_repo)
        return AgenciaDetalheDTO.from_domain(agencia)

    def avaliacoes(self, agencia_id: str, ator_id: str | None) -> list[AvaliacaoDTO]:
        self._buscar_visivel(agencia_id, ator_id)
        return [
            AvaliacaoDTO.from_domain(a)
            for a in self._avaliacao_repo.listar_por_alvo(TipoAlvo.AGENCIA, agencia_id)
        ]

    def avaliar(self, agencia_id: str, ator_id: str, dados: NovaAvaliacaoDTO) -> AvaliacaoDTO:
        self._buscar_visivel(agencia_id, ator_id)
        try:
            nota = NotaAvaliacao(dados.rating)
        except ValueError as err:
            raise DadosInvalidos(str(err)) from err
        avaliacao = self._avaliacao_repo.inserir(
            TipoAlvo.AGENCIA, agencia_id, ator_id, nota, dados.comentario.strip(),
        )
        logger.info("Avaliacao {} registrada para agencia {}", avaliacao.id, agencia_id)
        return AvaliacaoDTO.from_domain(avaliacao)

    def submeter(self, ator_id: str, dados: AgenciaFormDTO) -> AgenciaDetalheDTO:
        agencia = self._montar(str(uuid.uuid4()), ator_id, dados)
        if self._agencia_repo.buscar_por_cnpj(agencia.cnpj) is not None:
            raise Conflito("Já existe uma agência cadastrada com este CNPJ")
        salva = self._agencia_repo.inserir(agencia)
        logger.info("Agencia {} ({}) submetida por {}", salva.id, salva.cnpj, ator_id)
        return AgenciaDetalheDTO.from_domain(salva)

    def editar(self, agencia_id: str, ator_id: str, dados: AgenciaFormDTO) -> AgenciaDetalheDTO:
        atual = self._buscar_do_dono(agencia_id, ator_id)
        nova = self._montar(atual.id, ator_id, dados)
        outra = self._agencia_repo.buscar_por_cnpj(nova.cnpj)
        if outra is not None and outra.id != atual.id:
            raise Conflito("Já existe uma agência cadastrada com este CNPJ")
        editada = replace(
            atual,
            nome=nova.nome,
            cnpj=nova.cnpj,
            descricao=nova.descricao,
            website_url=nova.website_url,
            localizacao=nova.localizacao,
            especialidades=nova.especialidades,
            logo_url=nova.logo_url,
            cover_url=nova.cover_url,
        )
        salva = self._agencia_repo.atualizar(editada)
        [salva] = com_estatisticas_agencias([salva], self._avaliacao_repo)
        return AgenciaDetalheDTO.from_domain(salva)

    def remover(self, agencia_id: str, ator_id: str) -> None:
        self._buscar_do_dono(agencia_id, ator_id)
        self._agencia_repo.remover(agencia_id)
        logger.info("Agencia {} removida pelo dono", agencia_id)

    def _buscar_visivel(self, agencia_id: str, ator_id: str | None) -> Agencia:
        agencia = self._agencia_repo.buscar_por_id(agencia_id)
        if agencia is None:
            raise NaoEncontrado("Agência não encontrada")
        if not agencia.visivel_para(ator_id):
            raise NaoEncontrado("Esta agência não está disponível para visualização")
        return agencia

    def _buscar_do_dono(self, agencia_id: str, ator_id: str) -> Agencia:
        agencia = self._agencia_repo.buscar_por_id(agencia_id)
        if agencia is None:
            raise NaoEncontrado("Agência não encontrada")
        if agencia.user_id != ator_id:
            raise AcessoNegado("Apenas o responsável pode alterar esta agência")
        return agencia

    @staticmethod
    def _montar(agencia_id: str, ator_id: str, dados: AgenciaFormDTO) -> Agencia:
        desconhecidas = [e for e in dados.especialidades if e not in ESPECIALIDADES]
        if desconhecidas:
            raise DadosInvalidos(f"Especialidades desconhecidas: {', '.join(desconhecidas)}")
        try:
            cnpj = CNPJ(dados.cnpj)
        except ValueError as err:
            raise DadosInvalidos("CNPJ inválido") from err
        try:
            return Agencia(
                id=agencia_id,
                nome=NomeAgencia(dados.nome),
                cnpj=cnpj,
                descricao=dados.descricao.strip(),
                user_id=ator_id,
                localizacao=dados.localizacao.strip(),
                website_url=dados.website_url.strip(),
                especialidades=tuple(dict.fromkeys(dados.especialidades)),
                logo_url=dados.logo_url,
                cover_url=dados.cover_url,
                status=StatusVerificacao.PENDENTE,
            )
        except ValueError as err:
            raise DadosInvalidos(str(err)) from err
