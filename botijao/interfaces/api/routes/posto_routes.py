# botijao/interfaces/api/routes/posto_routes.py
from fastapi import APIRouter, Depends, Query

from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.dtos.posto_dto import (
    GasStationCreateDTO,
    GasStationDTO,
    GasStationUpdateDTO,
)
from botijao.application.services.gas_station_service import GasStationService
from botijao.domain.usuario.entities import User
from botijao.interfaces.api.dependencies import get_current_user, get_gas_station_service

router = APIRouter(prefix="/stations")


@router.get("", response_model=list[GasStationDTO])
def list_stations(
    active: bool = Query(default=False),
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> list[GasStationDTO]:
    if active:
        return service.list_active_by_user(user.id)
    return service.list_by_user(user.id)


@router.get("/search", response_model=list[GasStationDTO])
def search_stations(
    city: str | None = Query(default=None),
    state: str | None = Query(default=None),
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> list[GasStationDTO]:
    return service.search_by_location(city, state)


@router.post("", response_model=OperationResultDTO, status_code=201)
def create_station(
    payload: GasStationCreateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> OperationResultDTO:
    return service.create(user.id, payload.model_dump())


@router.get("/{station_id}", response_model=GasStationDTO)
def get_station(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> GasStationDTO:
    return service.get(station_id)


@router.put("/{station_id}", response_model=OperationResultDTO)
def update_station(
    station_id: str,
    payload: GasStationUpdateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> OperationResultDTO:
    return service.update(station_id, payload.model_dump(exclude_unset=True))


@router.delete("/{station_id}", response_model=OperationResultDTO)
def delete_station(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> OperationResultDTO:
    return service.delete(station_id)


@router.post("/{station_id}/toggle", response_model=OperationResultDTO)
def toggle_station(
    station_id: str,
    user: User = Depends(get_current_user),  # noqa: B008
    service: GasStationService = Depends(get_gas_station_service),  # noqa: B008
) -> OperationResultDTO:
    return service.toggle_active(station_id)
