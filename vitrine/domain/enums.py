# vitrine/domain/enums.py
from enum import StrEnum


class StatusVerificacao(StrEnum):
    PENDENTE = "pending"
    APROVADO = "approved"
    REJEITADO = "rejected"


class TipoPreco(StrEnum):
    GRATUITO = "free"
    PAGO = "paid"
    FREEMIUM = "freemium"


class Categoria(StrEnum):
    AUTOMACAO = "automation"
    CHATBOTS = "chatbots"
    ANALISE_DADOS = "data_analysis"
    CRIACAO_CONTEUDO = "content_creation"
    PESQUISA = "research"
    PRODUTIVIDADE = "productivity"
    FERRAMENTAS_DEV = "dev_tools"
    MACHINE_LEARNING = "machine_learning"

    @property
    def nome_exibicao(self) -> str:
        return _NOMES_CATEGORIA[self]


class TipoAlvo(StrEnum):
    """Entidade avaliada por uma Avaliacao."""
    AGENTE = "agent"
    AGENCIA = "agency"


_NOMES_CATEGORIA: dict[Categoria, str] = {
    Categoria.AUTOMACAO: "Automação",
    Categoria.CHATBOTS: "Chatbots",
    Categoria.ANALISE_DADOS: "Análise de Dados",
    Categoria.CRIACAO_CONTEUDO: "Criação de Conteúdo",
    Categoria.PESQUISA: "Pesquisa",
    Categoria.PRODUTIVIDADE: "Produtividade",
    Categoria.FERRAMENTAS_DEV: "Ferramentas para Devs",
    Categoria.MACHINE_LEARNING: "Machine Learning",
}
