# botijao/interfaces/api/routes/auth_routes.py
from fastapi import APIRouter, Depends, HTTPException

from botijao.application.dtos.auth_dto import (
    ResetPasswordRequestDTO,
    SessionDTO,
    SignInRequestDTO,
    SignUpRequestDTO,
)
from botijao.application.dtos.common_dto import OperationResultDTO
from botijao.application.services.auth_service import MSG_CREDENCIAIS_INVALIDAS, AuthService
from botijao.interfaces.api.dependencies import get_auth_service, get_bearer_token

router = APIRouter(prefix="/auth")


@router.post("/sign-in", response_model=OperationResultDTO)
def sign_in(
    payload: SignInRequestDTO,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> OperationResultDTO:
    return service.sign_in(payload.email, payload.password)


@router.post("/sign-up", response_model=OperationResultDTO, status_code=201)
def sign_up(
    payload: SignUpRequestDTO,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> OperationResultDTO:
    return service.sign_up(payload.to_domain())


@router.post("/reset-password", response_model=OperationResultDTO)
def reset_password(
    payload: ResetPasswordRequestDTO,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> OperationResultDTO:
    return service.reset_password(payload.email)


@router.post("/sign-out", response_model=OperationResultDTO)
def sign_out(
    token: str = Depends(get_bearer_token),  # noqa: B008
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> OperationResultDTO:
    return service.sign_out(token)


@router.get("/session", response_model=SessionDTO)
def current_session(
    token: str = Depends(get_bearer_token),  # noqa: B008
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> SessionDTO:
    sessao = service.current_session(token)
    if sessao is None:
        raise HTTPException(status_code=401, detail=MSG_CREDENCIAIS_INVALIDAS)
    return SessionDTO.from_domain(sessao)
