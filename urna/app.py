"""Main menus of the voting terminal: registration, login and the voting session."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from urna.admin import adm
from urna.console import Console, InvalidInput
from urna.listing import dados_logados, mostrar_candidatos
from urna.logger import AuditLog
from urna.models import Eleitor
from urna.results import resultado_eleicoes
from urna.security import Security
from urna.storage import Storage, gerar_titulo
from urna.voting import votando_governador, votando_presidente

_ENTRADA_INVALIDA = "Entrada inválida. Operacão cancelada.\n"
_IDADE_MINIMA = 16
_TOPO = "╔═══════════════════════════════════════════════╗\n"
_BASE = "╚═══════════════════════════════════════════════╝\n"

_MENU_INICIAL = (
    _TOPO
    + "║ Bem vindo ao sistema de votação brasileiro!   ║\n"
    + _BASE
    + "\n"
    + "===========================================\n"
    + "| 1. Cadastro.                            |\n"
    + "| 2. Login.                               |\n"
    + "| 3. Resultado das Eleições.              |\n"
    + "| 4. Entrar como administrador            |\n"
    + "===========================================\n"
    + "Digite uma opcão: "
)

_CABECALHO_VOTO = (
    _TOPO
    + "║ Bem vindo ao sistema de votação!              ║\n"
    + _BASE
    + "\n"
)

_MENU_VOTO = (
    "\n"
    "===========================================\n"
    "| 1. Votar                                 |\n"
    "| 2. Vizualizar Lista de Candidatos        |\n"
    "| 3. Sair                                  |\n"
    "===========================================\n"
    "Digite uma opção: "
)

_CABECALHO_LOGIN = _TOPO + "║ Login                                         ║\n" + _BASE + "\n"
_CABECALHO_CADASTRO = (
    _TOPO + "║ Cadastro de Eleitor                           ║\n" + _BASE + "\n"
)


def _entrada_invalida(console: Console, audit: AuditLog, mensagem: str) -> None:
    audit.log(mensagem)
    console.write(_ENTRADA_INVALIDA)
    console.discard_line()
    console.pause()
    console.clear()


def logar(console: Console, eleitores: list[Eleitor], audit: AuditLog) -> str | None:
    """Ask for name and CPF; return the matching voter's number, or None on failure."""
    console.write(_CABECALHO_LOGIN)
    console.write("Insira seu nome: ")
    nome = console.read_line()
    console.write("Insira seu CPF: ")
    cpf = console.read_line()

    if not nome or not cpf:
        console.write("Nome ou CPF não podem ser vazios.\n")
        console.pause()
        console.clear()
        return None

    for eleitor in eleitores:
        if eleitor.nome == nome and eleitor.cpf == cpf:
            console.write("Login realizado com sucesso!\n")
            console.pause()
            return eleitor.num_eleitor

    console.write("Login falhou. Verifique seu nome e CPF.\n")
    console.pause()
    console.clear()
    return None


def cadastrar_eleitor(
    console: Console,
    eleitores: list[Eleitor],
    storage: Storage,
    audit: AuditLog,
    rng: random.Random | None = None,
) -> Eleitor | None:
    """Register a new voter, save the list and return the voter, or None if refused."""
    audit.log("Iniciando cadastro de eleitor.")
    console.write(_CABECALHO_CADASTRO)
    console.write("Digite seu nome: ")
    nome = console.read_line()
    console.write("Digite seu CPF: ")
    cpf = console.read_line()
    console.write("Digite sua idade: ")
    try:
        idade = console.read_int()
    except InvalidInput:
        _entrada_invalida(console, audit, "Entrada inválida no cadastro de eleitor.")
        return None

    if idade < _IDADE_MINIMA:
        console.write("Você deve ter pelo menos 16 anos para se cadastrar.\n")
        audit.log(
            "Tentativa de cadastro de eleitor com idade menor que 16 anos: "
            f"{nome} - CPF: {cpf}"
        )
        console.pause()
        console.clear()
        return None

    if any(e.cpf == cpf for e in eleitores):
        audit.log(f"Tentativa de cadastro com CPF já existente: {cpf}")
        console.write("\n>>> ERRO: Este CPF já está cadastrado. <<<\n")
        console.write("Por favor, verifique os dados e tente novamente.\n")
        console.pause()
        console.clear()
        return None

    eleitor = Eleitor(nome=nome, cpf=cpf, idade=idade, num_eleitor=gerar_titulo(rng))
    eleitores.append(eleitor)
    storage.save_eleitores(eleitores)
    audit.log(f"Cadastro de eleitor realizado com sucesso: {nome} - CPF: {cpf}")

    console.clear()
    console.write("Cadastro realizado com sucesso!\n\n")
    console.write(f"Seu número de título de eleitor: {eleitor.num_eleitor}\n")
    console.write("\nAgora você pode votar!\n")
    console.pause()
    console.clear()
    return eleitor


def voto(console: Console, storage: Storage, audit: AuditLog, sessao: str) -> None:
    """Run the logged-in voter's menu until the voter leaves."""
    while True:
        console.write(_CABECALHO_VOTO)
        console.write(dados_logados(storage.load_eleitores(), sessao))
        console.write(_MENU_VOTO)
        try:
            opcao = console.read_int()
        except InvalidInput:
            _entrada_invalida(console, audit, "Entrada inválida no menu de votação.")
            continue

        if opcao == 1:
            console.clear()
            votando_presidente(console, storage, audit, sessao)
            votando_governador(console, storage, audit, sessao)
        elif opcao == 2:
            console.clear()
            mostrar_candidatos(console, storage.load_candidatos(), audit)
        elif opcao == 3:
            console.clear()
            console.write("Retornando ao menu inicial...\n")
            console.pause()
            console.clear()
            return
        else:
            console.clear()
            console.write("Opção inválida!\n")
            audit.log("Opção inválida no menu de votação.")
            console.pause()


def inicial(
    console: Console,
    storage: Storage,
    audit: AuditLog,
    security_path: str | Path = "hash.txt",
    rng: random.Random | None = None,
) -> None:
    """Run the start menu until the input is exhausted."""
    rng = rng or random.Random()
    eleitores = storage.load_eleitores()
    try:
        while True:
            console.write(_MENU_INICIAL)
            try:
                opcao = console.read_int()
            except InvalidInput:
                _entrada_invalida(console, audit, "Entrada inválida no menu inicial.")
                continue

            if opcao == 1:
                console.clear()
                cadastrar_eleitor(console, eleitores, storage, audit, rng)
            elif opcao == 2:
                console.clear()
                sessao = logar(console, eleitores, audit)
                if sessao is not None:
                    audit.log(f"Eleitor {sessao} logou no sistema.")
                    console.clear()
                    voto(console, storage, audit, sessao)
                    eleitores = storage.load_eleitores()
                console.clear()
            elif opcao == 3:
                console.clear()
                resultado_eleicoes(console, storage, audit)
            elif opcao == 4:
                console.clear()
                adm(console, storage, audit, Security(security_path, audit))
            else:
                console.clear()
                console.write("Opcao invalida!\n")
                audit.log("Opção inválida no menu inicial.")
                console.pause()
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the voting terminal in the current directory."""
    parser = argparse.ArgumentParser(
        prog="urna", description="Terminal de votação eletrônica."
    )
    parser.parse_args(argv)
    try:
        inicial(Console(), Storage(), AuditLog(), "hash.txt", random.Random())
    except KeyboardInterrupt:
        pass
    return 0