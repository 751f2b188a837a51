# botijao/interfaces/api/routes/validacao_routes.py
from fastapi import APIRouter

from botijao.application.dtos.validacao_dto import (
    CamposRequestDTO,
    CamposResultDTO,
    CNPJValidationDTO,
)
from botijao.application.services.validacao_service import validar_campos, validar_cnpj

router = APIRouter(prefix="/validacao")


@router.get("/cnpj/{cnpj_raw:path}", response_model=CNPJValidationDTO)
def get_validacao_cnpj(cnpj_raw: str) -> CNPJValidationDTO:
    # :path aceita o CNPJ formatado com "/"
    return validar_cnpj(cnpj_raw)


@router.post("/campos", response_model=CamposResultDTO)
def post_validacao_campos(payload: CamposRequestDTO) -> CamposResultDTO:
    return validar_campos(payload)
