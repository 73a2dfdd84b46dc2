from urna.models import Cadastro, Candidato, Eleitor


def _candidato(**kwargs):
    dados = dict(
        nome="Maria Silva",
        cpf="000.000.000-00",
        idade=40,
        num_eleitor="100000000001",
        numero=13,
        nome_urna="Maria",
        partido="PX",
        cargo="Presidente",
    )
    dados.update(kwargs)
    return Candidato(**dados)


def test_candidato_starts_without_votes():
    assert _candidato().votos == 0


def test_registrar_voto_increments():
    candidato = _candidato()
    candidato.registrar_voto()
    candidato.registrar_voto()
    assert candidato.votos == 2


def test_candidato_is_cadastro():
    candidato = _candidato()
    assert isinstance(candidato, Cadastro)
    assert candidato.nome == "Maria Silva"
    assert candidato.idade == 40


def test_concorre_a_accepts_both_capitalisations():
    assert _candidato(cargo="Presidente").concorre_a("Presidente")
    assert _candidato(cargo="presidente").concorre_a("Presidente")
    assert _candidato(cargo="Governador").concorre_a("governador")


def test_concorre_a_rejects_other_office():
    assert not _candidato(cargo="Governador").concorre_a("Presidente")
    assert not _candidato(cargo="PRESIDENTE").concorre_a("Presidente")


def test_mostrar_dados_lists_fields():
    texto = _candidato().mostrar_dados()
    linhas = texto.splitlines()
    assert "Dados do Candidato" in linhas[1]
    assert "Nome: Maria" in linhas
    assert "Partido: PX" in linhas
    assert "Numero: 13" in linhas
    assert "Cargo: Presidente" in linhas
    assert texto.endswith("\n")


def test_eleitor_defaults_not_voted():
    eleitor = Eleitor(nome="Ana", cpf="1", idade=20, num_eleitor="2")
    assert eleitor.votou_presidente is False
    assert eleitor.votou_governador is False


def test_eleitor_vote_flags_are_mutable():
    eleitor = Eleitor(nome="Ana", cpf="1", idade=20, num_eleitor="2")
    eleitor.votou_presidente = True
    assert eleitor.votou_presidente is True
    assert eleitor.votou_governador is False