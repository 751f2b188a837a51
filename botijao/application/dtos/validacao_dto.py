# botijao/application/dtos/validacao_dto.py
from pydantic import BaseModel


class CNPJValidationDTO(BaseModel):
    cnpj: str
    digitos: str
    formatado: str
    valido: bool
    erro: str | None = None


class CamposRequestDTO(BaseModel):
    """Campos opcionais; so os informados sao validados."""

    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    name: str | None = None
    phone: str | None = None
    cnpj: str | None = None


class CamposResultDTO(BaseModel):
    valido: bool
    erros: dict[str, str]
