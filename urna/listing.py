"""Candidate listings and the logged-in voter's details."""

from __future__ import annotations

from typing import Iterable

from urna.console import Console, InvalidInput
from urna.logger import AuditLog
from urna.models import Candidato, Eleitor

_ENTRADA_INVALIDA = "Entrada inválida. Operacão cancelada.\n"
_TOPO = "╔═══════════════════════════════════════════════╗\n"
_BASE = "╚═══════════════════════════════════════════════╝\n"

_MENU_LISTAGEM = (
    _TOPO
    + "║ Listagem de candidatos:                       ║\n"
    + _BASE
    + "==========================================\n"
    + "| 1. Listar por cargo                    |\n"
    + "| 2. Listar por partido                  |\n"
    + "| 3. Listar todos os candidatos          |\n"
    + "==========================================\n"
    + "Digite uma opção: "
)

_MENU_CARGO = (
    _TOPO
    + "║ Listar por cargo                              ║\n"
    + _BASE
    + "===========================================\n"
    + "| 1. Presidente                           |\n"
    + "| 2. Governador                           |\n"
    + "| 3. Sair                                 |\n"
    + "===========================================\n"
    + "Digite uma opção: "
)

_MENU_PARTIDO = (
    _TOPO
    + "║ Listar por partido                            ║\n"
    + _BASE
    + "Digite o partido que deseja listar: "
)


def filtrar_por_cargo(candidatos: Iterable[Candidato], cargo: str) -> list[Candidato]:
    """Return the candidates running for ``cargo``, in their original order."""
    return [c for c in candidatos if c.concorre_a(cargo)]


def filtrar_por_partido(candidatos: Iterable[Candidato], partido: str) -> list[Candidato]:
    """Return the candidates of exactly ``partido``, in their original order."""
    return [c for c in candidatos if c.partido == partido]


def dados_logados(eleitores: Iterable[Eleitor], sessao: str) -> str:
    """Return the name and voter number of each voter whose number is ``sessao``."""
    return "".join(
        f"Nome: {e.nome}\nTitulo de eleitor: {e.num_eleitor}\n"
        for e in eleitores
        if e.num_eleitor == sessao
    )


def _exibir(console: Console, candidatos: Iterable[Candidato]) -> None:
    for candidato in candidatos:
        console.write(candidato.mostrar_dados() + "\n")


def _entrada_invalida(console: Console, audit: AuditLog, mensagem: str) -> None:
    audit.log(mensagem)
    console.write(_ENTRADA_INVALIDA)
    console.discard_line()
    console.pause()
    console.clear()


def mostrar_candidatos(console: Console, candidatos: list[Candidato], audit: AuditLog) -> None:
    """Run the listing menu: by office, by party, or every candidate."""
    while True:
        console.write(_MENU_LISTAGEM)
        try:
            opcao = console.read_int()
        except InvalidInput:
            _entrada_invalida(console, audit, "Entrada inválida no menu de listagem de candidatos.")
            continue

        if opcao == 1:
            console.clear()
            console.write(_MENU_CARGO)
            try:
                cargo = console.read_int()
            except InvalidInput:
                _entrada_invalida(console, audit, "Entrada inválida no menu de listagem por cargo.")
                continue
            console.clear()
            if cargo in (1, 2):
                nome_cargo = "Presidente" if cargo == 1 else "Governador"
                _exibir(console, filtrar_por_cargo(candidatos, nome_cargo))
                console.pause()
                console.clear()
                return
            if cargo == 3:
                console.write("Retornando ao menu de listagem\n")
            else:
                console.write("Opção inválida!\n")
            console.pause()
            console.clear()

        elif opcao == 2:
            console.clear()
            console.write(_MENU_PARTIDO)
            partido = console.read_token()
            _exibir(console, filtrar_por_partido(candidatos, partido))
            console.pause()
            console.clear()
            return

        elif opcao == 3:
            console.clear()
            console.write(
                "Lista de todos os candidatos disponíveis. \n"
                "===========================================\n"
                "| Presidentes                             |\n"
                "=========================================== \n"
            )
            _exibir(console, filtrar_por_cargo(candidatos, "Presidente"))
            console.write(
                "===========================================\n"
                "| Governadores:                           |\n"
                "===========================================\n"
            )
            _exibir(console, filtrar_por_cargo(candidatos, "Governador"))
            if not candidatos:
                console.write("Nenhum candidato cadastrado.\n")
                return
            console.write("\n")
            console.pause()
            console.clear()
            return

        else:
            console.write("Opção inválida\n")
            console.pause()
            console.clear()