"""Registration records for voters and candidates."""

from __future__ import annotations

from dataclasses import dataclass

_TOPO = "╔═══════════════════════════════════════════════╗\n"
_TITULO = "║ Dados do Candidato                            ║\n"
_BASE = "╚═══════════════════════════════════════════════╝\n"
_RODAPE = "________________________________________________\n"


@dataclass
class Cadastro:
    """Basic personal data shared by voters and candidates."""

    nome: str = ""
    cpf: str = ""
    idade: int = 0
    num_eleitor: str = ""


@dataclass
class Candidato(Cadastro):
    """A person running for an office, with the votes received so far."""

    numero: int = 0
    nome_urna: str = ""
    partido: str = ""
    cargo: str = ""
    votos: int = 0

    def registrar_voto(self) -> None:
        """Add one vote to this candidate."""
        self.votos += 1

    def concorre_a(self, cargo: str) -> bool:
        """Tell whether the candidate runs for ``cargo``.

        The office name is accepted with either a capital or a lower-case
        first letter, as the stored records use both spellings.
        """
        if not cargo:
            return self.cargo == cargo
        variantes = {
            cargo,
            cargo[0].lower() + cargo[1:],
            cargo[0].upper() + cargo[1:],
        }
        return self.cargo in variantes

    def mostrar_dados(self) -> str:
        """Return the candidate's ballot card as display text."""
        return (
            _TOPO
            + _TITULO
            + _BASE
            + f"Nome: {self.nome_urna}\n"
            + f"Partido: {self.partido}\n"
            + f"Numero: {self.numero}\n"
            + f"Cargo: {self.cargo}\n"
            + _RODAPE
        )


@dataclass
class Eleitor(Cadastro):
    """A registered voter and the offices already voted for."""

    votou_presidente: bool = False
    votou_governador: bool = False