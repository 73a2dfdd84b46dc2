"""Vote counting and the election result report."""

from __future__ import annotations

from typing import Iterable

from urna.console import Console
from urna.logger import AuditLog
from urna.models import Candidato
from urna.storage import Storage

_LINHA_TABELA = "------------------------------------------------------------------\n"
_LINHA_RESUMO = "-----------------------------------------\n"
_LINHA_LISTA = "------------------------------------------------------------\n"
_CARGOS = ("Presidente", "Governador")


def apurar(cargo: str, candidatos: Iterable[Candidato]) -> list[Candidato]:
    """Return the candidates for exactly ``cargo``, most voted first."""
    do_cargo = [c for c in candidatos if c.cargo == cargo]
    return sorted(do_cargo, key=lambda c: c.votos, reverse=True)


def formatar_resultado(cargo: str, candidatos: Iterable[Candidato], audit: AuditLog) -> str:
    """Return the result table, summary and winner for ``cargo``."""
    partes = [f"\n\n--- VOTAÇÃO POR CANDIDATO PARA {cargo} ---\n\n"]
    apurados = apurar(cargo, candidatos)

    if not apurados:
        audit.log(f"Nenhum candidato concorreu a este cargo: {cargo}")
        partes.append("Nenhum candidato concorreu a este cargo.\n")
        return "".join(partes)

    total = sum(c.votos for c in apurados)
    if total == 0:
        audit.log(f"Nenhum voto registrado para o cargo: {cargo}")
        partes.append("Nenhum voto registado para este cargo.\n")
        return "".join(partes)

    partes.append(f"{'Candidato (Urna)':<25}{'Partido':<15}{'Votos':<10}Percentual (%)\n")
    partes.append(_LINHA_TABELA)
    audit.log(f"Exibindo resultados para o cargo: {cargo}")

    for candidato in apurados:
        percentual = candidato.votos / total * 100.0
        barra = "#" * int(percentual / 5)
        partes.append(
            f"{candidato.nome_urna:<25}{candidato.partido:<15}{candidato.votos:<10}"
            f"{percentual:.2f}%\n"
        )
        partes.append(f"[{barra}]\n")

    vencedor = apurados[0]
    partes.append(f"\n--- RESUMO DA VOTAÇÃO PARA {cargo} ---\n")
    partes.append(f"Total de Votos Apurados: {total}\n")
    partes.append(_LINHA_RESUMO)
    partes.append(f"VENCEDOR(A): {vencedor.nome_urna} ({vencedor.partido})\n")
    partes.append(_LINHA_RESUMO)
    audit.log(f"Resultados exibidos com sucesso para o cargo: {cargo}")
    return "".join(partes)


def listar_candidatos(candidatos: Iterable[Candidato]) -> str:
    """Return a table of every registered candidate's number, ballot name and party."""
    candidatos = list(candidatos)
    partes = ["\n--- Lista de Candidatos Cadastrados ---\n"]
    if not candidatos:
        partes.append("Nenhum candidato cadastrado no momento.\n")
        return "".join(partes)
    partes.append(f"{'Número':<10}{'Nome na Urna':<30}{'Partido':<20}\n")
    partes.append(_LINHA_LISTA)
    partes.extend(
        f"{c.numero:<10}{c.nome_urna:<30}{c.partido:<20}\n" for c in candidatos
    )
    partes.append(_LINHA_LISTA)
    return "".join(partes)


def resultado_eleicoes(console: Console, storage: Storage, audit: AuditLog) -> None:
    """Show the official results for president and governor."""
    candidatos = storage.load_candidatos()
    console.write(
        "\n\n=========================================\n"
        "      RESULTADO OFICIAL DAS ELEICOES\n"
        "=========================================\n"
    )
    audit.log("Exibindo resultados das eleições.")

    if not candidatos:
        audit.log("Nenhum candidato cadastrado.")
        console.write("Nenhum candidato cadastrado.\n")
        console.pause()
        console.clear()
        return

    for cargo in _CARGOS:
        console.write(formatar_resultado(cargo, candidatos, audit))
    console.pause()
    console.clear()