# botijao/infrastructure/auth_events.py
#
# Registro de ouvintes de mudanca de sessao. Uma instancia por processo,
# guardada em app.state; o repo de auth recebe a referencia e dispara eventos.
from __future__ import annotations

import threading
from collections.abc import Callable

from botijao.domain.usuario.entities import AuthSession
from botijao.domain.usuario.repository import AuthListener

from .log import log

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"
PASSWORD_RECOVERY = "PASSWORD_RECOVERY"


class AuthStateBroadcaster:
    def __init__(self) -> None:
        self._ouvintes: list[AuthListener] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: AuthListener) -> Callable[[], None]:
        with self._lock:
            self._ouvintes.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._ouvintes:
                    self._ouvintes.remove(callback)

        return unsubscribe

    def emit(self, evento: str, sessao: AuthSession | None) -> None:
        with self._lock:
            ouvintes = list(self._ouvintes)
        for ouvinte in ouvintes:
            try:
                ouvinte(evento, sessao)
            except Exception as exc:  # noqa: BLE001
                # ouvinte com defeito nao derruba a operacao de auth
                log(f"ouvinte de auth falhou em {evento}: {exc}")

    def __len__(self) -> int:
        return len(self._ouvintes)
