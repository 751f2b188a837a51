# botijao/application/dtos/empresa_dto.py
from __future__ import annotations

from pydantic import BaseModel

from botijao.domain.empresa.entities import Company


class CompanyUpdateDTO(BaseModel):
    name: str | None = None
    cnpj: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class CompanyDTO(BaseModel):
    id: str | None
    name: str
    cnpj: str
    email: str
    phone: str | None
    address: str | None
    city: str | None
    state: str | None
    zip_code: str | None
    is_complete: bool

    @classmethod
    def from_domain(cls, empresa: Company) -> CompanyDTO:
        return cls(
            id=empresa.id,
            name=empresa.name,
            cnpj=empresa.formatted_cnpj,
            email=empresa.email,
            phone=empresa.phone,
            address=empresa.address,
            city=empresa.city,
            state=empresa.state,
            zip_code=empresa.zip_code,
            is_complete=empresa.is_complete,
        )
