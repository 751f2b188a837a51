# botijao/interfaces/api/routes/estoque_routes.py
from fastapi import APIRouter, Depends

from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.dtos.estoque_dto import (
    InventoryCreateDTO,
    InventoryItemDTO,
    InventoryStatsDTO,
    InventoryUpdateDTO,
    OrderItemDTO,
    StockAvailabilityDTO,
    StockMovementDTO,
)
from botijao.application.services.inventory_service import InventoryService
from botijao.domain.usuario.entities import User
from botijao.interfaces.api.dependencies import get_current_user, get_inventory_service

router = APIRouter()


@router.get("/stations/{station_id}/inventory", response_model=list[InventoryItemDTO])
def list_inventory(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> list[InventoryItemDTO]:
    return service.list_by_gas_station(station_id)


@router.get("/stations/{station_id}/inventory/low-stock", response_model=list[InventoryItemDTO])
def list_low_stock(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> list[InventoryItemDTO]:
    return service.low_stock(station_id)


@router.get("/stations/{station_id}/inventory/out-of-stock", response_model=list[InventoryItemDTO])
def list_out_of_stock(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> list[InventoryItemDTO]:
    return service.out_of_stock(station_id)


@router.get("/stations/{station_id}/inventory/stats", response_model=InventoryStatsDTO)
def inventory_stats(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> InventoryStatsDTO:
    return service.stats(station_id)


@router.post("/stations/{station_id}/inventory/availability", response_model=StockAvailabilityDTO)
def check_availability(
    station_id: str,
    itens: list[OrderItemDTO],
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> StockAvailabilityDTO:
    return service.check_stock_availability(station_id, itens)


@router.post("/inventory", response_model=OperationResultDTO, status_code=201)
def create_inventory_item(
    payload: InventoryCreateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> OperationResultDTO:
    return service.create(payload.model_dump())


@router.get("/inventory/{inventory_id}", response_model=InventoryItemDTO)
def get_inventory_item(
    inventory_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> InventoryItemDTO:
    return service.get(inventory_id)


@router.put("/inventory/{inventory_id}", response_model=OperationResultDTO)
def update_inventory_item(
    inventory_id: str,
    payload: InventoryUpdateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> OperationResultDTO:
    return service.update(inventory_id, payload.model_dump(exclude_unset=True))


@router.delete("/inventory/{inventory_id}", response_model=OperationResultDTO)
def delete_inventory_item(
    inventory_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> OperationResultDTO:
    return service.delete(inventory_id)


@router.post("/inventory/{inventory_id}/add", response_model=OperationResultDTO)
def add_stock(
    inventory_id: str,
    payload: StockMovementDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> OperationResultDTO:
    return service.add_stock(inventory_id, payload.quantity)


@router.post("/inventory/{inventory_id}/remove", response_model=OperationResultDTO)
def remove_stock(
    inventory_id: str,
    payload: StockMovementDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> OperationResultDTO:
    return service.remove_stock(inventory_id, payload.quantity)
