"""Administrator menu: authentication and candidate management."""

from __future__ import annotations

from urna.console import Console, InvalidInput
from urna.logger import AuditLog
from urna.models import Candidato
from urna.results import listar_candidatos
from urna.security import Security
from urna.storage import Storage

_ENTRADA_INVALIDA = "Entrada inválida. Operacão cancelada.\n"
_IDADE_MINIMA = 35

_MENU_ADMIN = (
    "Bem-vindo ao menu do administrador!\n"
    "\n"
    "Digite uma opção:\n"
    "\n"
    "1. Cadastrar Candidato\n"
    "2. Deletar Candidato\n"
    "3. Sair\n"
)


def _encerrar(console: Console, mensagem: str) -> None:
    console.write(mensagem)
    console.pause()
    console.clear()


def _entrada_invalida(console: Console, audit: AuditLog, mensagem: str) -> None:
    audit.log(mensagem)
    console.write(_ENTRADA_INVALIDA)
    console.discard_line()
    console.pause()
    console.clear()


def adm(console: Console, storage: Storage, audit: AuditLog, security: Security) -> None:
    """Ask for the administrator password and open the admin menu on success."""
    audit.log("Tentativa de autenticação do administrador.")

    if not security.arquivo_aberto:
        console.write("Error: O arquivo hash.txt não pôde ser aberto!\n\n")
        audit.log("Erro ao abrir o arquivo hash.txt")
        console.pause()
        console.clear()
        return

    audit.log("Arquivo hash.txt aberto com sucesso")
    console.write("Digite a senha do administrador: ")

    if security.autenticar_admin(console):
        console.clear()
        menu_admin(console, storage, audit)
        return

    console.write("Falha na autenticação do administrador.\n")
    audit.log("Falha na autenticação do administrador.")
    console.pause()
    console.clear()


def menu_admin(console: Console, storage: Storage, audit: AuditLog) -> None:
    """Run the admin menu until the administrator chooses to leave."""
    candidatos = storage.load_candidatos()
    audit.log("Menu do administrador iniciado.")

    while True:
        console.write(_MENU_ADMIN)
        try:
            opcao = console.read_int()
        except InvalidInput:
            _entrada_invalida(console, audit, "Entrada inválida no menu do administrador.")
            continue

        if opcao == 1:
            console.clear()
            cadastrar_candidato(console, candidatos, storage, audit)
        elif opcao == 2:
            console.clear()
            deletar_candidato(console, candidatos, storage, audit)
        elif opcao == 3:
            audit.log("Administrador saiu do menu.")
            _encerrar(console, "Retornando ao menu inicial...\n")
            return
        else:
            _encerrar(console, "Opção inválida, digite novamente!\n")


def cadastrar_candidato(
    console: Console, candidatos: list[Candidato], storage: Storage, audit: AuditLog
) -> None:
    """Read a new candidate's data, append it to ``candidatos`` and save the list.

    An age that cannot be read counts as zero and is refused as too young;
    the unreadable input is left for the next read to report.
    """
    audit.log("Iniciando cadastro de candidato.")

    console.write("Cadastrar Candidato\n")
    console.write("Digite o nome do candidato: ")
    nome = console.read_line()
    console.write("Digite o CPF do candidato: ")
    cpf = console.read_line()
    console.write("Digite a idade do candidato: ")
    try:
        idade = console.read_int()
    except InvalidInput:
        idade = 0

    if idade < _IDADE_MINIMA:
        audit.log(
            "Tentativa de cadastro de candidato com idade menor que 35 anos: "
            f"{nome} - CPF: {cpf}"
        )
        _encerrar(console, "O candidato deve ter pelo menos 35 anos para se candidatar.\n")
        return

    console.write("Digite o número de eleitor do candidato: ")
    num_eleitor = console.read_line()
    console.write("Digite o número do candidato: ")
    try:
        numero = console.read_int()
    except InvalidInput:
        _entrada_invalida(console, audit, "Entrada inválida no cadastro de candidato.")
        return

    console.write("Digite o nome de urna do candidato: ")
    nome_urna = console.read_line()
    console.write("Digite o partido do candidato: ")
    partido = console.read_line()
    console.write("Digite o cargo disputado pelo candidato: ")
    cargo = console.read_line()

    candidatos.append(
        Candidato(
            nome=nome,
            cpf=cpf,
            idade=idade,
            num_eleitor=num_eleitor,
            numero=numero,
            nome_urna=nome_urna,
            partido=partido,
            cargo=cargo,
        )
    )
    storage.save_candidatos(candidatos)

    audit.log(
        f"Cadastro de candidato realizado com sucesso: {nome} - CPF: {cpf} - Número: {numero}"
    )
    _encerrar(console, "\nCandidato cadastrado com sucesso!\n")


def deletar_candidato(
    console: Console, candidatos: list[Candidato], storage: Storage, audit: AuditLog
) -> None:
    """Remove the candidate with a given voter number after confirmation."""
    audit.log("Iniciando processo de deleção de candidato.")

    if not candidatos:
        console.write("\nNão há candidatos para deletar.\n")
        audit.log("Tentativa de deleção de candidato sem candidatos cadastrados.")
        console.pause()
        console.clear()
        return

    console.write(listar_candidatos(candidatos))
    console.write("\nDigite o número de eleitor do candidato que deseja deletar: ")
    numero_para_deletar = console.read_token()

    indice = next(
        (i for i, c in enumerate(candidatos) if c.num_eleitor == numero_para_deletar),
        None,
    )
    if indice is None:
        audit.log(f"Candidato não encontrado para deleção: Número {numero_para_deletar}")
        _encerrar(
            console,
            f"\nCandidato com o número {numero_para_deletar} Não foi encontrado.\n",
        )
        return

    alvo = candidatos[indice]
    audit.log(
        f"Candidato encontrado para deleção: {alvo.nome_urna} - Número: {alvo.numero}"
    )
    console.write(
        "\nCandidato encontrado:\n"
        f"Nome na Urna: {alvo.nome_urna}\n"
        f"Partido: {alvo.partido}\n"
    )
    console.write("\nTem certeza que deseja deletar este candidato? [S/N]: ")
    confirmacao = console.read_token()[0]

    if confirmacao in ("S", "s"):
        del candidatos[indice]
        storage.save_candidatos(candidatos)
        console.write("\nCandidato deletado com sucesso!\n")
        audit.log(
            f"Candidato deletado com sucesso: {alvo.nome_urna} - Número: {alvo.numero}"
        )
        console.pause()
        console.clear()
        return

    console.write("\nOperação cancelada pelo utilizador.\n")
    audit.log("Operação de deleção de candidato cancelada pelo usuário.")
    console.pause()
    console.clear()