# botijao/domain/shared/validators.py
#
# Validadores de formato de campo unico.
#
# Contrato:
#   - Recebem o valor cru (ou None) e retornam None (valido) ou UMA mensagem.
#   - Nunca levantam excecao e nunca normalizam o valor recebido.
#   - Mensagens sao as exibidas ao usuario final (pt-BR sem acentos).
from __future__ import annotations

import re

from .cnpj import MSG_OBRIGATORIO, check_cnpj, format_cnpj, only_digits

# Mesmo formato aceito pelo frontend. "a@b." falha (exige 1 char apos o ultimo
# ponto), mas "a@b..c" passa (comportamento preservado, ver tests).
EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

SENHA_MIN = 6
NOME_MIN = 2

__all__ = [
    "format_cnpj",
    "collect",
    "format_phone",
    "only_digits",
    "validate_cnpj",
    "validate_confirm_password",
    "validate_email",
    "validate_name",
    "validate_password",
    "validate_phone",
]


def _vazio(valor: str | None) -> bool:
    return not valor or not valor.strip()


def validate_email(email: str | None) -> str | None:
    if _vazio(email):
        return "E-mail e obrigatorio"
    if EMAIL_REGEX.fullmatch(email) is None:  # type: ignore[arg-type]
        return "Formato de e-mail invalido"
    return None


def validate_password(password: str | None) -> str | None:
    if not password:
        return "Senha e obrigatoria"
    if len(password) < SENHA_MIN:
        return f"Senha deve ter pelo menos {SENHA_MIN} caracteres"
    return None


def validate_confirm_password(password: str | None, confirm_password: str | None) -> str | None:
    if not confirm_password:
        return "Confirmacao de senha e obrigatoria"
    if password != confirm_password:
        return "Senhas nao coincidem"
    return None


def validate_name(name: str | None, field_name: str = "Nome") -> str | None:
    if _vazio(name):
        return f"{field_name} e obrigatorio"
    if len(name.strip()) < NOME_MIN:  # type: ignore[union-attr]
        return f"{field_name} deve ter pelo menos {NOME_MIN} caracteres"
    return None


def validate_phone(phone: str | None) -> str | None:
    """Campo opcional: ausente e valido."""
    if not phone:
        return None
    if len(only_digits(phone)) not in (10, 11):
        return "Telefone deve ter 10 ou 11 digitos"
    return None


def validate_cnpj(cnpj: str | None) -> str | None:
    if _vazio(cnpj):
        return MSG_OBRIGATORIO
    return check_cnpj(cnpj)


def format_phone(phone: str) -> str:
    d = only_digits(phone)
    if len(d) == 10:
        return f"({d[:2]}) {d[2:6]}-{d[6:]}"
    if len(d) == 11:
        return f"({d[:2]}) {d[2:7]}-{d[7:]}"
    return phone


def collect(*mensagens: str | None) -> list[str]:
    """Descarta os None, mantendo a ordem. Base dos validate() das entidades."""
    return [m for m in mensagens if m]
