import io

import pytest

from urna.console import Console
from urna.logger import AuditLog
from urna.models import Candidato
from urna.results import apurar, formatar_resultado, listar_candidatos, resultado_eleicoes
from urna.storage import Storage


def _candidato(numero, nome_urna, partido, cargo, votos=0):
    return Candidato(
        nome=f"Pessoa {numero}",
        cpf=f"cpf-{numero}",
        idade=40,
        num_eleitor=f"t{numero}",
        numero=numero,
        nome_urna=nome_urna,
        partido=partido,
        cargo=cargo,
        votos=votos,
    )


@pytest.fixture
def audit(tmp_path):
    return AuditLog(tmp_path / "auditoria.log")


def _console(texto=""):
    saida = io.StringIO()
    limpezas = []
    console = Console(io.StringIO(texto), saida, lambda: limpezas.append(True))
    return console, saida, limpezas


def test_apurar_filters_exact_office_and_sorts_by_votes():
    candidatos = [
        _candidato(1, "A", "P1", "Presidente", 2),
        _candidato(2, "B", "P2", "Governador", 9),
        _candidato(3, "C", "P3", "Presidente", 7),
        _candidato(4, "D", "P4", "presidente", 50),
    ]
    apurados = apurar("Presidente", candidatos)
    assert [c.nome_urna for c in apurados] == ["C", "A"]


def test_apurar_result_is_non_increasing():
    candidatos = [_candidato(n, str(n), "P", "Governador", v) for n, v in enumerate([3, 8, 1, 8, 0])]
    votos = [c.votos for c in apurar("Governador", candidatos)]
    assert votos == sorted(votos, reverse=True)
    assert len(votos) == 5


def test_formatar_without_candidates(audit):
    texto = formatar_resultado("Presidente", [], audit)
    assert "--- VOTAÇÃO POR CANDIDATO PARA Presidente ---" in texto
    assert "Nenhum candidato concorreu a este cargo." in texto
    assert "Nenhum candidato concorreu a este cargo: Presidente" in audit.path.read_text(encoding="utf-8")


def test_formatar_without_votes(audit):
    texto = formatar_resultado("Governador", [_candidato(1, "A", "P1", "Governador")], audit)
    assert "Nenhum voto registado para este cargo." in texto
    assert "VENCEDOR" not in texto


def test_formatar_worked_example(audit):
    candidatos = [
        _candidato(1, "Beto", "PB", "Presidente", 1),
        _candidato(2, "Ana", "PA", "Presidente", 3),
    ]
    texto = formatar_resultado("Presidente", candidatos, audit)
    assert "75.00%" in texto
    assert "25.00%" in texto
    assert "[" + "#" * 15 + "]" in texto
    assert "Total de Votos Apurados: 4" in texto
    assert "VENCEDOR(A): Ana (PA)" in texto
    assert texto.index("Ana") < texto.index("Beto")
    log = audit.path.read_text(encoding="utf-8")
    assert "Resultados exibidos com sucesso para o cargo: Presidente" in log


def test_listar_candidatos_empty():
    assert "Nenhum candidato cadastrado no momento." in listar_candidatos([])


def test_listar_candidatos_rows():
    texto = listar_candidatos([_candidato(13, "Fulano", "PX", "Presidente")])
    linhas = texto.splitlines()
    assert any(l.startswith("13") and "Fulano" in l and "PX" in l for l in linhas)
    assert "--- Lista de Candidatos Cadastrados ---" in texto


def test_resultado_eleicoes_without_candidates(tmp_path, audit):
    console, saida, limpezas = _console()
    resultado_eleicoes(console, Storage(tmp_path), audit)
    assert "RESULTADO OFICIAL DAS ELEICOES" in saida.getvalue()
    assert "Nenhum candidato cadastrado." in saida.getvalue()
    assert limpezas == [True]


def test_resultado_eleicoes_reports_both_offices(tmp_path, audit):
    storage = Storage(tmp_path)
    storage.save_candidatos(
        [
            _candidato(1, "Ana", "PA", "Presidente", 2),
            _candidato(2, "Gil", "PG", "Governador", 1),
        ]
    )
    console, saida, _ = _console()
    resultado_eleicoes(console, storage, audit)
    texto = saida.getvalue()
    assert "VENCEDOR(A): Ana (PA)" in texto
    assert "VENCEDOR(A): Gil (PG)" in texto
    assert texto.index("PARA Presidente") < texto.index("PARA Governador")