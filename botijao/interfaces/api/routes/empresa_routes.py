# botijao/interfaces/api/routes/empresa_routes.py
from fastapi import APIRouter, Depends

from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.dtos.empresa_dto import CompanyDTO, CompanyUpdateDTO
from botijao.application.services.company_service import CompanyService
from botijao.domain.usuario.entities import User
from botijao.interfaces.api.dependencies import get_company_service, get_current_user

router = APIRouter(prefix="/company")


@router.get("", response_model=CompanyDTO)
def get_company(
    user: User = Depends(get_current_user),  # noqa: B008
    service: CompanyService = Depends(get_company_service),  # noqa: B008
) -> CompanyDTO:
    return service.get_by_user(user.id)


@router.put("", response_model=OperationResultDTO)
def update_company(
    payload: CompanyUpdateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: CompanyService = Depends(get_company_service),  # noqa: B008
) -> OperationResultDTO:
    return service.update(user.id, payload.model_dump(exclude_unset=True))
