"""Terminal input and output in the manner of a whitespace-token stream."""

from __future__ import annotations

import re
import subprocess
import sys
from typing import Callable, TextIO

PAUSA_MENSAGEM = "Pressione Enter para continuar . . .\n"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_PALAVRA = re.compile(r"\S+")
_INTEIRO = re.compile(r"[+-]?\d+")


class InvalidInput(ValueError):
    """Raised when the pending input cannot be read as the requested value."""


def _limpar_terminal() -> None:
    subprocess.run("clear || cls", shell=True, check=False)


class Console:
    """Reads words, lines and integers from a text stream and writes text.

    Values are read as a formatted C-style stream would read them: leading
    whitespace, newlines included, is skipped, and a failed read leaves the
    offending input in place until :meth:`discard_line` drops it.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: Callable[[], None] | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear_screen = clear_screen if clear_screen is not None else _limpar_terminal
        self._pending = ""

    def write(self, text: str) -> None:
        """Write ``text`` and flush it at once."""
        self._stdout.write(text)
        self._stdout.flush()

    def _skip_whitespace(self) -> None:
        while True:
            restante = self._pending.lstrip()
            if restante:
                self._pending = restante
                return
            linha = self._stdin.readline()
            if not linha:
                self._pending = ""
                raise EOFError("fim da entrada")
            self._pending = linha

    def read_token(self) -> str:
        """Return the next whitespace-delimited word."""
        self._skip_whitespace()
        encontrado = _PALAVRA.match(self._pending)
        assert encontrado is not None
        self._pending = self._pending[encontrado.end():]
        return encontrado.group()

    def read_line(self) -> str:
        """Skip leading whitespace and return the rest of the line."""
        self._skip_whitespace()
        linha, _, resto = self._pending.partition("\n")
        self._pending = resto
        return linha.rstrip("\r")

    def read_int(self) -> int:
        """Return the integer at the front of the input.

        Raises InvalidInput, leaving the input untouched, if no integer
        starts there or it does not fit in 32 bits.
        """
        self._skip_whitespace()
        encontrado = _INTEIRO.match(self._pending)
        if encontrado is None:
            raise InvalidInput(f"não é um número: {self._pending.strip()!r}")
        valor = int(encontrado.group())
        if not _INT_MIN <= valor <= _INT_MAX:
            raise InvalidInput(f"número fora do intervalo: {valor}")
        self._pending = self._pending[encontrado.end():]
        return valor

    def discard_line(self) -> None:
        """Drop input up to and including the next newline."""
        if "\n" in self._pending:
            self._pending = self._pending.partition("\n")[2]
            return
        self._pending = ""
        self._stdin.readline()

    def pause(self) -> None:
        """Show the pause prompt and wait for Enter on an interactive terminal."""
        self.write(PAUSA_MENSAGEM)
        if self._stdin.isatty():
            self._stdin.readline()

    def clear(self) -> None:
        """Clear the screen."""
        self._clear_screen()