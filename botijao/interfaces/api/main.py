# botijao/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from botijao.domain.shared.errors import (
    BackendError,
    ConflictError,
    NotFoundError,
    TransitionError,
    ValidationError,
)
from botijao.infrastructure.auth_events import AuthStateBroadcaster
from botijao.infrastructure.config import get_settings
from botijao.infrastructure.duckdb_connection import create_connection
from botijao.infrastructure.log import log
from botijao.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    # Testes injetam a conexao antes do startup
    if getattr(app.state, "db", None) is None:
        app.state.db = create_connection(settings)
        log(f"store aberto em {settings.duckdb_path}")
    app.state.auth_events = AuthStateBroadcaster()
    yield


settings = get_settings()

app = FastAPI(
    title="Botijao Entregas API",
    debug=settings.debug,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse({"detail": exc.erros}, status_code=422)


@app.exception_handler(ConflictError)
async def _conflict_error(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=409)


@app.exception_handler(TransitionError)
async def _transition_error(request: Request, exc: TransitionError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=409)


@app.exception_handler(NotFoundError)
async def _not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=404)


@app.exception_handler(BackendError)
async def _backend_error(request: Request, exc: BackendError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=400)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# Routers: rotas fixas (/search, /permissions, /plans) declaradas antes das /{id}
from botijao.interfaces.api.routes.assinatura_routes import router as assinatura_router  # noqa: E402
from botijao.interfaces.api.routes.auth_routes import router as auth_router  # noqa: E402
from botijao.interfaces.api.routes.empresa_routes import router as empresa_router  # noqa: E402
from botijao.interfaces.api.routes.entrega_routes import router as entrega_router  # noqa: E402
from botijao.interfaces.api.routes.entregador_routes import router as entregador_router  # noqa: E402
from botijao.interfaces.api.routes.estoque_routes import router as estoque_router  # noqa: E402
from botijao.interfaces.api.routes.posto_routes import router as posto_router  # noqa: E402
from botijao.interfaces.api.routes.validacao_routes import router as validacao_router  # noqa: E402

app.include_router(auth_router, prefix="/api")
app.include_router(validacao_router, prefix="/api")
app.include_router(posto_router, prefix="/api")
app.include_router(estoque_router, prefix="/api")
app.include_router(entrega_router, prefix="/api")
app.include_router(entregador_router, prefix="/api")
app.include_router(empresa_router, prefix="/api")
app.include_router(assinatura_router, prefix="/api")
