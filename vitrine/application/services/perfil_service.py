# vitrine/application/services/perfil_service.py
from __future__ import annotations

from loguru import logger

from vitrine.domain.agencia.repository import AgenciaRepository
from vitrine.domain.agente.repository import AgenteRepository
from vitrine.domain.avaliacao.repository import AvaliacaoRepository
from vitrine.domain.perfil.entities import Perfil, username_de_email
from vitrine.domain.perfil.repository import PerfilRepository

from ..dtos.agencia_dto import AgenciaDetalheDTO
from ..dtos.agente_dto import AgenteDetalheDTO
from ..dtos.avaliacao_dto import AvaliacaoDTO
from ..dtos.perfil_dto import PainelPerfilDTO, PerfilDTO
from .estatisticas import com_estatisticas_agencias, com_estatisticas_agentes


class PerfilService:
    def __init__(
        self,
        perfil_repo: PerfilRepository,
        agente_repo: AgenteRepository,
        agencia_repo: AgenciaRepository,
        avaliacao_repo: AvaliacaoRepository,
    ) -> None:
        self._perfil_repo = perfil_repo
        self._agente_repo = agente_repo
        self._agencia_repo = agencia_repo
        self._avaliacao_repo = avaliacao_repo

    def obter_ou_criar(self, ator_id: str, email: str | None) -> Perfil:
        """Primeiro acesso cria o perfil com username = parte local do e-mail."""
        perfil = self._perfil_repo.buscar_por_id(ator_id)
        if perfil is not None:
            return perfil
        logger.info("Criando perfil para {}", ator_id)
        return self._perfil_repo.inserir(
            Perfil(id=ator_id, username=username_de_email(email, ator_id)),
        )

    def painel(self, ator_id: str, email: str | None) -> PainelPerfilDTO:
        perfil = self.obter_ou_criar(ator_id, email)
        agentes = com_estatisticas_agentes(self._agente_repo.listar_por_usuario(ator_id), self._avaliacao_repo)
        agencias = com_estatisticas_agencias(self._agencia_repo.listar_por_usuario(ator_id), self._avaliacao_repo)
        return PainelPerfilDTO(
            perfil=PerfilDTO.from_domain(perfil),
            agentes=[AgenteDetalheDTO.from_domain(a) for a in agentes],
            agencias=[AgenciaDetalheDTO.from_domain(a) for a in agencias],
            avaliacoes=[AvaliacaoDTO.from_domain(a) for a in self._avaliacao_repo.listar_por_usuario(ator_id)],
        )
