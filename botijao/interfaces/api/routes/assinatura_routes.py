# botijao/interfaces/api/routes/assinatura_routes.py
from fastapi import APIRouter, Depends

from botijao.application.dtos.assinatura_dto import PlanDTO, SubscriptionCreateDTO, SubscriptionDTO
from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.services.subscription_service import SubscriptionService
from botijao.domain.usuario.entities import User
from botijao.interfaces.api.dependencies import get_current_user, get_subscription_service

router = APIRouter(prefix="/subscriptions")


@router.get("/plans", response_model=list[PlanDTO])
def list_plans(
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> list[PlanDTO]:
    return service.list_plans()


@router.get("/current", response_model=SubscriptionDTO | None)
def current_subscription(
    user: User = Depends(get_current_user),  # noqa: B008
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> SubscriptionDTO | None:
    return service.current(user.id)


@router.get("/history", response_model=list[SubscriptionDTO])
def subscription_history(
    user: User = Depends(get_current_user),  # noqa: B008
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> list[SubscriptionDTO]:
    return service.history(user.id)


@router.get("/active")
def has_active_subscription(
    user: User = Depends(get_current_user),  # noqa: B008
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> dict[str, bool]:
    return {"active": service.has_active(user.id)}


@router.post("", response_model=OperationResultDTO, status_code=201)
def create_subscription(
    payload: SubscriptionCreateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> OperationResultDTO:
    return service.create(user.id, payload.plan_id)


@router.put("", response_model=OperationResultDTO)
def change_subscription(
    payload: SubscriptionCreateDTO,
    user: User = Depends(get_current_user),  # noqa: B008
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> OperationResultDTO:
    return service.change(user.id, payload.plan_id)


@router.delete("", response_model=OperationResultDTO)
def cancel_subscription(
    user: User = Depends(get_current_user),  # noqa: B008
    service: SubscriptionService = Depends(get_subscription_service),  # noqa: B008
) -> OperationResultDTO:
    return service.cancel(user.id)
