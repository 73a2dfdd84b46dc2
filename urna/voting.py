"""Casting votes for president and governor."""

from __future__ import annotations

from urna.console import Console, InvalidInput
from urna.logger import AuditLog
from urna.models import Candidato, Eleitor
from urna.storage import Storage

_ENTRADA_INVALIDA = "Entrada inválida. Operacão cancelada.\n"
_CABECALHO = (
    "╔═══════════════════════════════════════════════╗\n"
    "║ Votação                                       ║\n"
    "╚═══════════════════════════════════════════════╝\n"
    "\n"
)
_CONFIRMACAO = "Confirmar voto?\n1. Sim\n2. Não\n"


def _encerrar(console: Console, mensagem: str, limpar: bool = True) -> None:
    console.write(mensagem)
    console.pause()
    if limpar:
        console.clear()


def _entrada_invalida(console: Console, audit: AuditLog, mensagem: str) -> None:
    audit.log(mensagem)
    console.write(_ENTRADA_INVALIDA)
    console.discard_line()
    console.pause()
    console.clear()


def _carregar(
    console: Console, storage: Storage, audit: AuditLog
) -> tuple[list[Candidato], list[Eleitor]] | None:
    candidatos = storage.load_candidatos()
    eleitores = storage.load_eleitores()
    if not candidatos:
        audit.log("Nenhum candidato cadastrado.")
        _encerrar(console, "Nenhum candidato cadastrado.\n")
        return None
    if not eleitores:
        audit.log("Nenhum eleitor cadastrado.")
        _encerrar(console, "Nenhum eleitor cadastrado.\n", limpar=False)
        return None
    return candidatos, eleitores


def _ler_numero(
    console: Console, audit: AuditLog, sessao: str, prompt: str, cargo: str
) -> int | None:
    console.write(_CABECALHO + prompt)
    audit.log(f"Eleitor {sessao} iniciou o processo de votação para {cargo}.")
    try:
        numero = console.read_int()
    except InvalidInput:
        _entrada_invalida(
            console, audit, f"Entrada inválida no processo de votação para {cargo}."
        )
        return None
    if numero <= 0:
        audit.log("Número de voto inválido.")
        _encerrar(console, "Número de voto inválido. Por favor, tente novamente.\n")
        return None
    return numero


def _ler_confirmacao(
    console: Console, audit: AuditLog, candidato: Candidato, cargo: str
) -> int | None:
    audit.log("Exibindo dados do candidato para confirmação de voto.")
    console.write(candidato.mostrar_dados() + "\n" + _CONFIRMACAO)
    try:
        return console.read_int()
    except InvalidInput:
        _entrada_invalida(
            console,
            audit,
            f"Entrada inválida no menu de confirmação de voto para {cargo}.",
        )
        return None


def _nao_encontrado(console: Console, audit: AuditLog, numero: int) -> None:
    audit.log(f"Candidato não encontrado para o número de voto: {numero}")
    _encerrar(console, "Candidato não encontrado. Por favor, tente novamente.\n")


def votando_presidente(console: Console, storage: Storage, audit: AuditLog, sessao: str) -> None:
    """Ask the logged-in voter for a presidential vote and record it once confirmed."""
    audit.log("Iniciando o processo de votação para presidente.")
    carregados = _carregar(console, storage, audit)
    if carregados is None:
        return
    candidatos, eleitores = carregados

    numero = _ler_numero(
        console, audit, sessao, "Digite o número do candidato para presidente: ", "presidente"
    )
    if numero is None:
        return

    encontrado = False
    for candidato in candidatos:
        if candidato.numero != numero or not candidato.concorre_a("Presidente"):
            continue
        audit.log(f"Candidato encontrado: {candidato.nome}")
        encontrado = True

        if any(e.num_eleitor == sessao and e.votou_presidente for e in eleitores):
            audit.log(f"Eleitor {sessao} já votou para presidente.")
            _encerrar(console, "Você já votou para presidente!\n")
            return

        for eleitor in eleitores:
            if eleitor.num_eleitor != sessao:
                continue
            confirmacao = _ler_confirmacao(console, audit, candidato, "presidente")
            if confirmacao is None:
                return
            if confirmacao == 1:
                eleitor.votou_presidente = True
                storage.save_eleitores(eleitores)
                candidato.registrar_voto()
                storage.save_candidatos(candidatos)
                audit.log(f"Eleitor {sessao} confirmou o voto para presidente.")
                _encerrar(console, "Voto registrado com sucesso!\n")
            elif confirmacao == 2:
                audit.log(f"Eleitor {sessao} cancelou o voto para presidente.")
                _encerrar(console, "Voto cancelado.\nRetornando ao menu de votação\n")

    if not encontrado:
        _nao_encontrado(console, audit, numero)


def votando_governador(console: Console, storage: Storage, audit: AuditLog, sessao: str) -> None:
    """Ask the logged-in voter for a governor vote and record it once confirmed."""
    carregados = _carregar(console, storage, audit)
    if carregados is None:
        return
    candidatos, eleitores = carregados

    numero = _ler_numero(
        console, audit, sessao, "Digite o número de candidato para governador: ", "governador"
    )
    if numero is None:
        return

    encontrado = False
    for candidato in candidatos:
        if candidato.numero != numero or not candidato.concorre_a("Governador"):
            continue
        encontrado = True
        audit.log(f"Candidato encontrado: {candidato.nome}")

        if any(e.num_eleitor == sessao and e.votou_governador for e in eleitores):
            audit.log(f"Eleitor {sessao} já votou para governador.")
            _encerrar(console, "Você já votou para governador!\n")
            return

        eleitor = next((e for e in eleitores if e.num_eleitor == sessao), None)
        if eleitor is None:
            continue
        confirmacao = _ler_confirmacao(console, audit, candidato, "governador")
        if confirmacao is None:
            return
        if confirmacao == 1:
            candidato.registrar_voto()
            storage.save_candidatos(candidatos)
            eleitor.votou_governador = True
            storage.save_eleitores(eleitores)
            audit.log(f"Eleitor {sessao} confirmou o voto para governador.")
            _encerrar(console, "Voto registrado com sucesso!\n")
        else:
            audit.log(f"Eleitor {sessao} cancelou o voto para governador.")
            _encerrar(console, "Voto não confirmado.\nRetornando ao menu de votação\n")
        return

    if not encontrado:
        _nao_encontrado(console, audit, numero)