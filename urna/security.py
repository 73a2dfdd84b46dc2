"""Administrator authentication against a stored SHA-256 hash."""

from __future__ import annotations

import hashlib
from pathlib import Path

from urna.console import Console
from urna.logger import AuditLog


def hash_senha(senha: str) -> str:
    """Return the lower-case hex SHA-256 digest of ``senha``."""
    return hashlib.sha256(senha.encode("utf-8")).hexdigest()


class Security:
    """Holds the administrator's password hash loaded from a file."""

    def __init__(self, hash_path: str | Path = "hash.txt", audit: AuditLog | None = None) -> None:
        self.audit = audit if audit is not None else AuditLog()
        self.arquivo_aberto = True
        self.hash_loaded = ""
        try:
            conteudo = Path(hash_path).read_text(encoding="utf-8")
        except OSError:
            self.arquivo_aberto = False
            return
        palavras = conteudo.split()
        if palavras:
            self.hash_loaded = palavras[0]

    def autenticar(self, senha: str) -> bool:
        """Tell whether ``senha`` hashes to the stored value, logging the outcome."""
        if hash_senha(senha) == self.hash_loaded:
            self.audit.log("Autenticação do administrador bem-sucedida")
            return True
        self.audit.log("Falha na autenticação do administrador")
        return False

    def autenticar_admin(self, console: Console) -> bool:
        """Read a password word from ``console``, drop the rest of the line, and check it."""
        entrada = console.read_token()
        console.discard_line()
        return self.autenticar(entrada)