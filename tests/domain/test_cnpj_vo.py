# tests/domain/test_cnpj_vo.py
import dataclasses

import pytest

from vitrine.domain.agencia.value_objects import CNPJ, mascarar_cnpj, normalizar_cnpj, validar_cnpj

_VALIDO = "11222333000181"


def test_cnpj_valido_formatado():
    """Aceita CNPJ com pontuacao e armazena sem formatacao."""
    cnpj = CNPJ("11.222.333/0001-81")
    assert cnpj.valor == "11222333000181"


def test_cnpj_valido_sem_formatacao():
    """Aceita CNPJ sem pontuacao e gera formatacao."""
    cnpj = CNPJ("11222333000181")
    assert cnpj.formatado == "11.222.333/0001-81"


def test_cnpj_digitos_verificadores_invalidos():
    """Rejeita CNPJ com digitos verificadores errados."""
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    """CNPJs com todos digitos iguais sao invalidos, mesmo com DV 'correto'."""
    for d in "0123456789":
        assert validar_cnpj(d * 14) is False
    with pytest.raises(ValueError):
        CNPJ("00.000.000/0000-00")


def test_cnpj_comprimento_errado():
    """Rejeita strings com menos ou mais de 14 digitos."""
    assert validar_cnpj("123") is False
    assert validar_cnpj("123456789012345") is False
    assert validar_cnpj("") is False
    assert validar_cnpj("../-") is False


def test_validar_cnpj_aceita_outros_validos():
    assert validar_cnpj("33.000.167/0001-01") is True
    assert validar_cnpj("11.444.777/0001-61") is True


def test_validar_cnpj_independe_de_formatacao():
    for raw in ("11222333000181", "11.222.333/0001-81", " 11 222 333 0001 81 ", "11-222-333/000181"):
        assert validar_cnpj(raw) is True


def test_validar_cnpj_qualquer_digito_alterado_invalida():
    for pos in range(14):
        for novo in "0123456789":
            if novo == _VALIDO[pos]:
                continue
            mutado = _VALIDO[:pos] + novo + _VALIDO[pos + 1:]
            assert validar_cnpj(mutado) is False, mutado


def test_validar_cnpj_nunca_levanta_para_entrada_nao_str():
    for entrada in (None, 11222333000181, b"11222333000181", ["11222333000181"]):
        assert validar_cnpj(entrada) is False  # type: ignore[arg-type]


def test_validar_cnpj_ignora_digitos_nao_ascii():
    # digitos arabe-indicos nao contam como digitos de CNPJ
    assert validar_cnpj("١١٢٢٢٣٣٣٠٠٠١٨١") is False


def test_normalizar_cnpj_remove_mascara():
    assert normalizar_cnpj("11.222.333/0001-81") == "11222333000181"


def test_mascarar_cnpj_progressivo():
    assert mascarar_cnpj("") == ""
    assert mascarar_cnpj("11") == "11"
    assert mascarar_cnpj("112223") == "11.222.3"
    assert mascarar_cnpj("112223330") == "11.222.333/0"
    assert mascarar_cnpj("1122233300018") == "11.222.333/0001-8"
    assert mascarar_cnpj("11222333000181999") == "11.222.333/0001-81"


def test_cnpj_imutavel():
    """frozen=True impede atribuicao."""
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj._valor = "outro"  # type: ignore[misc]


def test_cnpj_igualdade_por_valor():
    """Dois CNPJs com mesmo valor (formatado ou nao) sao iguais."""
    assert CNPJ("11.222.333/0001-81") == CNPJ("11222333000181")


def test_cnpj_str_e_repr():
    cnpj = CNPJ(_VALIDO)
    assert str(cnpj) == "11.222.333/0001-81"
    assert repr(cnpj) == "CNPJ('11.222.333/0001-81')"


def test_cnpj_armazenado_nao_revalida():
    cnpj = CNPJ.armazenado("11.222.333/0001-99")
    assert cnpj.valor == "11222333000199"
    assert cnpj.formatado == "11.222.333/0001-99"
    assert not cnpj.valido
    assert CNPJ.armazenado(_VALIDO) == CNPJ(_VALIDO)
    assert CNPJ(_VALIDO).valido
