"""Append-only audit log with timestamped lines."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path


class AuditLog:
    """Writes audit messages to a file, one timestamped line each."""

    def __init__(self, path: str | Path = "auditoria.log") -> None:
        self.path = Path(path)

    def log(self, mensagem: str) -> None:
        """Append ``mensagem`` prefixed with the local date and time."""
        try:
            carimbo = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        except (OverflowError, OSError, ValueError):
            carimbo = "data invalida"
        try:
            with self.path.open("a", encoding="utf-8") as arquivo:
                arquivo.write(f"[{carimbo}] {mensagem}\n")
        except OSError:
            print("Erro ao abrir o arquivo de log.", file=sys.stderr)