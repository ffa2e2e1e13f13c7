# tests/domain/test_perfil_entity.py
from vitrine.domain.perfil.entities import Perfil, username_de_email


def test_username_parte_local_do_email():
    assert username_de_email("maria.silva@example.com", "u1") == "maria.silva"


def test_username_sem_email_usa_fallback():
    assert username_de_email(None, "u1") == "u1"
    assert username_de_email("sem-arroba", "u1") == "u1"
    assert username_de_email("@example.com", "u1") == "u1"


def test_somente_premium_verifica():
    assert Perfil(id="u1", username="a").pode_verificar is False
    assert Perfil(id="u2", username="b", is_premium_user=True).pode_verificar is True
