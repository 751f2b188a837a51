# botijao/interfaces/api/routes/entregador_routes.py
from fastapi import APIRouter, Depends, Query

from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.dtos.entregador_dto import (
    DeliverymanCreateDTO,
    DeliverymanDTO,
    DeliverymanUpdateDTO,
    PermissionDTO,
    PermissionsUpdateDTO,
)
from botijao.application.services.deliveryman_service import DeliverymanService
from botijao.domain.usuario.entities import User
from botijao.interfaces.api.dependencies import get_current_user, get_deliveryman_service

router = APIRouter(prefix="/deliverymen")


@router.get("", response_model=list[DeliverymanDTO])
def list_deliverymen(
    gas_station_id: str | None = Query(default=None),
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> list[DeliverymanDTO]:
    if gas_station_id:
        return service.list_by_gas_station(gas_station_id)
    return service.list_all()


@router.get("/permissions", response_model=list[PermissionDTO])
def list_permissions() -> list[PermissionDTO]:
    return DeliverymanService.available_permissions()


@router.post("", response_model=OperationResultDTO, status_code=201)
def create_deliveryman(
    payload: DeliverymanCreateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> OperationResultDTO:
    return service.create(payload.model_dump())


@router.get("/{deliveryman_id}", response_model=DeliverymanDTO)
def get_deliveryman(
    deliveryman_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> DeliverymanDTO:
    return service.get(deliveryman_id)


@router.put("/{deliveryman_id}", response_model=OperationResultDTO)
def update_deliveryman(
    deliveryman_id: str,
    payload: DeliverymanUpdateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> OperationResultDTO:
    return service.update(deliveryman_id, payload.model_dump(exclude_unset=True))


@router.delete("/{deliveryman_id}", response_model=OperationResultDTO)
def delete_deliveryman(
    deliveryman_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> OperationResultDTO:
    return service.delete(deliveryman_id)


@router.post("/{deliveryman_id}/activate", response_model=OperationResultDTO)
def activate_deliveryman(
    deliveryman_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> OperationResultDTO:
    return service.activate(deliveryman_id)


@router.post("/{deliveryman_id}/deactivate", response_model=OperationResultDTO)
def deactivate_deliveryman(
    deliveryman_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> OperationResultDTO:
    return service.deactivate(deliveryman_id)


@router.put("/{deliveryman_id}/permissions", response_model=OperationResultDTO)
def update_permissions(
    deliveryman_id: str,
    payload: PermissionsUpdateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliverymanService = Depends(get_deliveryman_service),  # noqa: B008
) -> OperationResultDTO:
    return service.update_permissions(deliveryman_id, payload.permissions)
