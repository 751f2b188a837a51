# tests/domain/test_validators.py
from botijao.domain.shared.validators import (
    collect,
    format_phone,
    validate_cnpj,
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)


def test_email_vazio_obrigatorio():
    assert validate_email("") == "E-mail e obrigatorio"
    assert validate_email(None) == "E-mail e obrigatorio"
    assert validate_email("   ") == "E-mail e obrigatorio"


def test_email_sem_ponto_no_dominio_invalido():
    assert validate_email("a@b") == "Formato de e-mail invalido"


def test_email_valido():
    assert validate_email("a@b.com") is None
    assert validate_email("maria.silva@gas.com.br") is None


def test_email_com_espaco_ou_dois_arrobas_invalido():
    assert validate_email("a b@c.com") == "Formato de e-mail invalido"
    assert validate_email("a@@b.com") == "Formato de e-mail invalido"


def test_email_fronteira_ponto_final():
    """Regex preservada como esta: exige 1 char apos o ultimo ponto casado,
    mas esse char pode ser outro ponto."""
    assert validate_email("a@b.") == "Formato de e-mail invalido"
    assert validate_email("a@b..") is None
    assert validate_email("a@b..c") is None


def test_email_quebra_de_linha_final_invalido():
    assert validate_email("a@b.com\n") == "Formato de e-mail invalido"


def test_senha():
    assert validate_password("") == "Senha e obrigatoria"
    assert validate_password("12345") == "Senha deve ter pelo menos 6 caracteres"
    assert validate_password("123456") is None


def test_confirmacao_de_senha():
    assert validate_confirm_password("123456", "") == "Confirmacao de senha e obrigatoria"
    assert validate_confirm_password("123456", "654321") == "Senhas nao coincidem"
    assert validate_confirm_password("123456", "123456") is None


def test_nome_parametrizado_pelo_campo():
    assert validate_name("") == "Nome e obrigatorio"
    assert validate_name(" a ", "Sobrenome") == "Sobrenome deve ter pelo menos 2 caracteres"
    assert validate_name("Jo") is None


def test_telefone_opcional():
    assert validate_phone(None) is None
    assert validate_phone("") is None


def test_telefone_10_ou_11_digitos():
    assert validate_phone("(11) 3333-4444") is None
    assert validate_phone("(11) 93333-4444") is None
    assert validate_phone("3333-4444") == "Telefone deve ter 10 ou 11 digitos"
    assert validate_phone("119333344445") == "Telefone deve ter 10 ou 11 digitos"


def test_cnpj_validador():
    assert validate_cnpj("") == "CNPJ e obrigatorio"
    assert validate_cnpj("123") == "CNPJ deve ter 14 digitos"
    assert validate_cnpj("11.222.333/0001-99") == "CNPJ invalido"
    assert validate_cnpj("11.222.333/0001-81") is None


def test_format_phone():
    assert format_phone("1133334444") == "(11) 3333-4444"
    assert format_phone("11933334444") == "(11) 93333-4444"
    assert format_phone("123") == "123"


def test_collect_preserva_ordem_e_descarta_none():
    assert collect(None, "b", None, "a") == ["b", "a"]
