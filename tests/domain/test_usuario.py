# tests/domain/test_usuario.py
from datetime import datetime

import pytest

from botijao.domain.usuario.entities import AuthSession, SignUpData, User
from botijao.domain.usuario.enums import user_type_label

AGORA = datetime(2026, 3, 1, 12, 0)


def _usuario() -> User:
    return User(id="u1", email="ana@gas.com", name="Ana")


def test_sessao_valida_ate_expirar():
    s = AuthSession("tok", "ref", _usuario(), expires_at=datetime(2026, 3, 1, 13, 0))
    assert s.is_valid(AGORA)
    assert not s.is_expired(AGORA)
    assert s.is_expired(datetime(2026, 3, 1, 13, 0))


def test_sessao_sem_token_ou_sem_usuario_invalida():
    assert not AuthSession("", "ref", _usuario()).is_valid(AGORA)
    assert not AuthSession("tok", "ref", None).is_valid(AGORA)
    assert AuthSession("tok", "ref", _usuario()).is_valid(AGORA)


def test_nome_a_partir_dos_metadados():
    assert User.from_metadata("1", "a@b.com", {"full_name": "Ana Lima"}).name == "Ana Lima"
    assert User.from_metadata("1", "a@b.com", {"first_name": "Ana", "last_name": "Lima"}).name == "Ana Lima"
    assert User.from_metadata("1", "ana@b.com", {}).name == "ana"


def test_usuario_sem_email_e_erro():
    with pytest.raises(ValueError):
        User.from_metadata("1", "", {})


def test_label_do_tipo():
    assert user_type_label("company") == "Pessoa Juridica"
    assert user_type_label("outro") == "Tipo desconhecido"


def _cadastro(**kw) -> SignUpData:
    base = dict(
        email="ana@gas.com", password="123456", confirm_password="123456",
        first_name="Ana", last_name="Lima",
    )
    base.update(kw)
    return SignUpData(**base)


def test_cadastro_pessoa_fisica_valido():
    assert _cadastro().validate() == []


def test_cadastro_coleta_todos_os_erros():
    erros = _cadastro(email="x", password="1", confirm_password="2", last_name="").validate()
    assert erros == [
        "Formato de e-mail invalido",
        "Senha deve ter pelo menos 6 caracteres",
        "Senhas nao coincidem",
        "Sobrenome e obrigatorio",
    ]


def test_cadastro_empresa_exige_nome_e_cnpj():
    erros = _cadastro(user_type="company").validate()
    assert erros == ["Nome da empresa e obrigatorio", "CNPJ e obrigatorio"]
    ok = _cadastro(user_type="company", company_name="Gas Ltda", cnpj="11.222.333/0001-81")
    assert ok.validate() == []
    assert ok.is_company


def test_tipo_de_usuario_invalido():
    assert _cadastro(user_type="admin").validate() == ["Tipo de usuario invalido"]
