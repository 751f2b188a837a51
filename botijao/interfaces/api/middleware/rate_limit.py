# botijao/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time
from collections import defaultdict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from botijao.infrastructure.config import get_settings
from botijao.infrastructure.log import log

JANELA_SEGUNDOS = 60.0
ISENTOS = frozenset({"/api/health"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante por IP, em memoria do processo."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = defaultdict(list)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0 or request.url.path in ISENTOS:
            return await call_next(request)

        # API key bypass
        if request.headers.get("X-API-Key"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        agora = time.time()
        recentes = [t for t in self._requests[client_ip] if agora - t < JANELA_SEGUNDOS]

        if len(recentes) >= limite:
            self._requests[client_ip] = recentes
            log(f"rate limit: {client_ip} bloqueado em {request.url.path}")
            return JSONResponse(
                {"detail": "Rate limit excedido. Tente novamente em 1 minuto."},
                status_code=429,
            )

        recentes.append(agora)
        self._requests[client_ip] = recentes
        return await call_next(request)
