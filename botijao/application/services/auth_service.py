# botijao/application/services/auth_service.py
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from botijao.domain.empresa.entities import Company
from botijao.domain.empresa.repository import CompanyRepository
from botijao.domain.shared.errors import (
    BackendError,
    ConflictError,
    ValidationError,
    translate_backend_error,
)
from botijao.domain.shared.validators import collect, validate_email, validate_password
from botijao.domain.usuario.entities import AuthSession, SignUpData
from botijao.domain.usuario.repository import AuthListener, AuthRepository, UserRepository
from botijao.infrastructure.log import log

from ..dtos.auth_dto import SessionDTO, UserDTO
from ..dtos.common_dto import OperationResultDTO

# Texto do backend (substring) -> mensagem para o usuario.
ERROS_SIGN_IN = {
    "Invalid login credentials": "E-mail ou senha incorretos",
    "Email not confirmed": "Confirme seu e-mail antes de fazer login",
}
ERROS_SIGN_UP = {
    "User already registered": "Este e-mail ja esta cadastrado",
    "Password should be at least": "Senha deve ter pelo menos 6 caracteres",
}
ERROS_RESET = {
    "Unable to validate email address": "E-mail nao encontrado em nossa base de dados",
}

MSG_CREDENCIAIS_INVALIDAS = "Credenciais invalidas"


class AuthService:
    """Imperative Shell: valida, consulta pre-condicoes e delega ao backend de auth."""

    def __init__(
        self,
        auth_repo: AuthRepository,
        user_repo: UserRepository,
        company_repo: CompanyRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._auth_repo = auth_repo
        self._user_repo = user_repo
        self._company_repo = company_repo
        self._relogio = relogio

    def sign_in(self, email: str, password: str) -> OperationResultDTO:
        erros = collect(validate_email(email), validate_password(password))
        if erros:
            raise ValidationError(erros)

        try:
            sessao = self._auth_repo.sign_in(email.strip().lower(), password)
        except BackendError as exc:
            raise self._traduzir(exc, ERROS_SIGN_IN, "sign_in") from exc

        if not sessao.is_valid(self._relogio()):
            raise BackendError(MSG_CREDENCIAIS_INVALIDAS)
        log(f"sign_in ok: usuario {sessao.user.id if sessao.user else '?'}")
        return OperationResultDTO(
            success=True, message="Login realizado com sucesso", data=SessionDTO.from_domain(sessao),
        )

    def sign_up(self, data: SignUpData) -> OperationResultDTO:
        erros = data.validate()
        if erros:
            raise ValidationError(erros)

        email = data.email.strip().lower()
        if self._user_repo.get_by_email(email) is not None:
            raise ConflictError(ERROS_SIGN_UP["User already registered"])
        if data.is_company and self._company_repo.get_by_cnpj(data.cnpj or "") is not None:
            raise ConflictError("Este CNPJ ja esta cadastrado")

        try:
            sessao = self._auth_repo.sign_up(email, data.password, data.metadata())
        except BackendError as exc:
            raise self._traduzir(exc, ERROS_SIGN_UP, "sign_up") from exc

        if data.is_company and sessao.user is not None:
            agora = self._relogio()
            empresa = self._company_repo.create(Company(
                name=(data.company_name or "").strip(),
                cnpj=data.cnpj or "",
                email=email,
                user_id=sessao.user.id,
                phone=data.phone,
                created_at=agora,
                updated_at=agora,
            ))
            log(f"empresa {empresa.id} criada para usuario {sessao.user.id}")

        log(f"sign_up ok: usuario {sessao.user.id if sessao.user else '?'} ({data.user_type})")
        if not sessao.access_token:
            return OperationResultDTO(
                success=True,
                message="Cadastro realizado. Confirme seu e-mail para entrar",
                data=UserDTO.from_domain(sessao.user) if sessao.user else None,
            )
        return OperationResultDTO(
            success=True, message="Cadastro realizado com sucesso", data=SessionDTO.from_domain(sessao),
        )

    def reset_password(self, email: str) -> OperationResultDTO:
        erro = validate_email(email)
        if erro:
            raise ValidationError(erro)
        try:
            self._auth_repo.reset_password(email.strip().lower())
        except BackendError as exc:
            raise self._traduzir(exc, ERROS_RESET, "reset_password") from exc
        log("reset de senha solicitado")
        return OperationResultDTO(
            success=True, message="E-mail de recuperacao enviado",
        )

    def sign_out(self, access_token: str) -> OperationResultDTO:
        self._auth_repo.sign_out(access_token)
        log("sign_out ok")
        return OperationResultDTO(success=True, message="Logout realizado com sucesso")

    def current_session(self, access_token: str) -> AuthSession | None:
        sessao = self._auth_repo.get_session(access_token)
        if sessao is None or not sessao.is_valid(self._relogio()):
            return None
        return sessao

    def on_auth_state_change(self, callback: AuthListener) -> Callable[[], None]:
        return self._auth_repo.on_auth_state_change(callback)

    def _traduzir(
        self, exc: BackendError, tabela: dict[str, str], operacao: str,
    ) -> BackendError:
        traduzido = translate_backend_error(exc, tabela)
        if traduzido is None:
            log(f"{operacao}: erro do backend sem traducao: {exc}")
            raise exc
        log(f"{operacao}: {exc} -> {traduzido}")
        return traduzido
