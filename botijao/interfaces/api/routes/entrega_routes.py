# botijao/interfaces/api/routes/entrega_routes.py
from datetime import datetime

from fastapi import APIRouter, Depends, Query

from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.dtos.entrega_dto import (
    DeliveryCreateDTO,
    DeliveryDTO,
    DeliveryStatsDTO,
    RejectDTO,
)
from botijao.application.services.delivery_service import DeliveryService
from botijao.domain.usuario.entities import User
from botijao.interfaces.api.dependencies import get_current_user, get_delivery_service

router = APIRouter()


@router.get("/stations/{station_id}/deliveries", response_model=list[DeliveryDTO])
def list_deliveries(
    station_id: str,
    status: str | None = Query(default=None),
    priority: str | None = Query(default=None),
    date_from: datetime | None = Query(default=None),
    date_to: datetime | None = Query(default=None),
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> list[DeliveryDTO]:
    return service.list_by_gas_station(station_id, status, priority, date_from, date_to)


@router.get("/stations/{station_id}/deliveries/stats", response_model=DeliveryStatsDTO)
def delivery_stats(
    station_id: str,
    date_from: datetime | None = Query(default=None),
    date_to: datetime | None = Query(default=None),
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> DeliveryStatsDTO:
    return service.stats(station_id, date_from, date_to)


@router.post("/deliveries", response_model=OperationResultDTO, status_code=201)
def create_delivery(
    payload: DeliveryCreateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> OperationResultDTO:
    return service.create(payload.model_dump())


@router.get("/deliveries/{delivery_id}", response_model=DeliveryDTO)
def get_delivery(
    delivery_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> DeliveryDTO:
    return service.get(delivery_id)


@router.post("/deliveries/{delivery_id}/accept", response_model=OperationResultDTO)
def accept_delivery(
    delivery_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> OperationResultDTO:
    return service.accept(delivery_id)


@router.post("/deliveries/{delivery_id}/reject", response_model=OperationResultDTO)
def reject_delivery(
    delivery_id: str,
    payload: RejectDTO | None = None,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> OperationResultDTO:
    return service.reject(delivery_id, payload.reason if payload else None)


@router.post("/deliveries/{delivery_id}/start", response_model=OperationResultDTO)
def start_delivery(
    delivery_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> OperationResultDTO:
    return service.start(delivery_id)


@router.post("/deliveries/{delivery_id}/complete", response_model=OperationResultDTO)
def complete_delivery(
    delivery_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> OperationResultDTO:
    return service.complete(delivery_id)


@router.post("/deliveries/{delivery_id}/invoice", response_model=OperationResultDTO)
def generate_invoice(
    delivery_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeliveryService = Depends(get_delivery_service),  # noqa: B008
) -> OperationResultDTO:
    return service.generate_invoice(delivery_id)
