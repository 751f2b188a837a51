# botijao/infrastructure/log.py
#
# Logger compartilhado da aplicacao.
#
#   - Uma unica funcao log() com tempo decorrido desde o start do processo.
#   - stdout com flush imediato; uma linha por chamada.
#   - Nunca receber CPF, senha ou token completos: mascarar antes de chamar.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[botijao {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
