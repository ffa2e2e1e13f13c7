# tests/domain/test_imagem_vo.py
import pytest

from vitrine.domain.imagem.value_objects import DestinoImagem, chave_objeto, validar_imagem


def test_politica_por_destino():
    assert DestinoImagem.AGENCIA_LOGO.politica.max_bytes == 512 * 1024
    assert DestinoImagem.AGENTE_CAPA.politica.max_bytes == 1024 * 1024
    assert DestinoImagem.AGENTE_LOGO.politica.max_lado_px == 400
    assert DestinoImagem.AGENCIA_CAPA.politica.max_lado_px == 1200


def test_aceita_imagem_dentro_do_limite():
    validar_imagem(DestinoImagem.AGENTE_LOGO, "image/webp", 512 * 1024)


def test_rejeita_nao_imagem():
    with pytest.raises(ValueError, match="apenas arquivos de imagem"):
        validar_imagem(DestinoImagem.AGENTE_LOGO, "application/pdf", 10)


def test_rejeita_acima_do_limite():
    with pytest.raises(ValueError, match="512 KB"):
        validar_imagem(DestinoImagem.AGENCIA_LOGO, "image/webp", 512 * 1024 + 1)


def test_rejeita_vazia():
    with pytest.raises(ValueError):
        validar_imagem(DestinoImagem.AGENTE_CAPA, "image/webp", 0)


def test_chave_objeto():
    assert chave_objeto(DestinoImagem.AGENCIA_LOGO, "u1", 1700000000000) == "agency-logos/u1/1700000000000-logo.webp"
    assert chave_objeto(DestinoImagem.AGENTE_CAPA, "u1", 5) == "agent-covers/u1/5-cover.webp"
