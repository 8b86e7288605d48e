# cadastro/infrastructure/log.py
#
# Stdout logger for the API process.
#
# Each line carries the process uptime ([cadastro MM:SS]) so rejected values
# can be lined up with deploys and restarts. Messages hold the field name and
# the rule message only; a raw CPF must never be passed here (LGPD), use
# CPF.mascarado instead.
from __future__ import annotations

import sys
import time

_inicio = time.monotonic()


def log(mensagem: str) -> None:
    """Escreve uma linha com o tempo de processo em stdout."""
    minutos, segundos = divmod(int(time.monotonic() - _inicio), 60)
    print(f"[cadastro {minutos:02d}:{segundos:02d}] {mensagem}", file=sys.stdout, flush=True)
