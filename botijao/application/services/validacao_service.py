# botijao/application/services/validacao_service.py
"""Validacao de campos de formulario sem IO. Usada pelo front antes do submit."""
from __future__ import annotations

from botijao.domain.shared.cnpj import check_cnpj, format_cnpj, only_digits
from botijao.domain.shared.validators import (
    validate_cnpj,
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)

from ..dtos.validacao_dto import CamposRequestDTO, CamposResultDTO, CNPJValidationDTO


def validar_cnpj(cnpj_raw: str) -> CNPJValidationDTO:
    erro = check_cnpj(cnpj_raw)
    return CNPJValidationDTO(
        cnpj=cnpj_raw,
        digitos=only_digits(cnpj_raw),
        formatado=format_cnpj(cnpj_raw),
        valido=erro is None,
        erro=erro,
    )


def validar_campos(campos: CamposRequestDTO) -> CamposResultDTO:
    """So os campos presentes sao checados; confirmacao depende da senha."""
    checagens = {
        "email": (campos.email, lambda: validate_email(campos.email)),
        "password": (campos.password, lambda: validate_password(campos.password)),
        "confirm_password": (
            campos.confirm_password,
            lambda: validate_confirm_password(campos.password, campos.confirm_password),
        ),
        "name": (campos.name, lambda: validate_name(campos.name)),
        "phone": (campos.phone, lambda: validate_phone(campos.phone)),
        "cnpj": (campos.cnpj, lambda: validate_cnpj(campos.cnpj)),
    }
    erros: dict[str, str] = {}
    for campo, (valor, checar) in checagens.items():
        if valor is None:
            continue
        mensagem = checar()
        if mensagem:
            erros[campo] = mensagem
    return CamposResultDTO(valido=not erros, erros=erros)
