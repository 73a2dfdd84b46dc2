import io

from urna.console import Console
from urna.logger import AuditLog
from urna.security import Security, hash_senha


def make_security(tmp_path, conteudo):
    caminho = tmp_path / "hash.txt"
    caminho.write_text(conteudo, encoding="utf-8")
    audit = AuditLog(tmp_path / "audit.log")
    return Security(caminho, audit), audit


def test_hash_senha_known_vector():
    assert hash_senha("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_hash_senha_is_hex_digest_of_64_chars():
    resultado = hash_senha("qualquer coisa")
    assert len(resultado) == 64
    assert set(resultado) <= set("0123456789abcdef")


def test_correct_password_authenticates(tmp_path):
    password = "password"
    security, audit = make_security(tmp_path, hash_senha(password) + "\n")
    assert security.arquivo_aberto is True
    assert security.autenticar(password) is True
    assert "Autenticação do administrador bem-sucedida" in audit.path.read_text(encoding="utf-8")


def test_wrong_password_fails_and_is_logged(tmp_path):
    password = "password"
    security, audit = make_security(tmp_path, hash_senha(password))
    assert security.autenticar("secret") is False
    assert "Falha na autenticação do administrador" in audit.path.read_text(encoding="utf-8")


def test_missing_file_marks_closed_and_rejects(tmp_path):
    audit = AuditLog(tmp_path / "audit.log")
    security = Security(tmp_path / "absent.txt", audit)
    assert security.arquivo_aberto is False
    assert security.hash_loaded == ""
    assert security.autenticar("password") is False


def test_hash_file_surrounding_whitespace_ignored(tmp_path):
    password = "password"
    security, _ = make_security(tmp_path, "  \n" + hash_senha(password) + "  \n\n")
    assert security.hash_loaded == hash_senha(password)


def test_autenticar_admin_reads_one_word_and_discards_rest(tmp_path):
    password = "password"
    security, _ = make_security(tmp_path, hash_senha(password))
    console = Console(io.StringIO("password trailing words\n7\n"), io.StringIO(), clear_screen=lambda: None)
    assert security.autenticar_admin(console) is True
    assert console.read_int() == 7