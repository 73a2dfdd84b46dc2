import io

import pytest

from urna.console import PAUSA_MENSAGEM, Console, InvalidInput


def make_console(script, cleared=None):
    saida = io.StringIO()
    hook = (lambda: cleared.append(True)) if cleared is not None else (lambda: None)
    return Console(io.StringIO(script), saida, clear_screen=hook), saida


def test_read_token_skips_whitespace_across_lines():
    console, _ = make_console("\n\n   alpha beta\ngamma\n")
    assert [console.read_token(), console.read_token(), console.read_token()] == [
        "alpha",
        "beta",
        "gamma",
    ]


def test_read_line_skips_leading_whitespace_and_keeps_spaces():
    console, _ = make_console("3\n   Maria da Silva  \nnext\n")
    assert console.read_int() == 3
    assert console.read_line() == "Maria da Silva  "
    assert console.read_line() == "next"


def test_read_int_parses_signed_numbers():
    console, _ = make_console("-7 +12\n")
    assert console.read_int() == -7
    assert console.read_int() == 12


def test_read_int_stops_at_non_digit():
    console, _ = make_console("12abc\n")
    assert console.read_int() == 12
    assert console.read_token() == "abc"


def test_invalid_int_leaves_input_until_discarded():
    console, _ = make_console("xyz 5\n8\n")
    with pytest.raises(InvalidInput):
        console.read_int()
    assert console.read_token() == "xyz"
    console.discard_line()
    assert console.read_int() == 8


def test_discard_line_after_failure_skips_to_next_line():
    console, _ = make_console("bad input here\n42\n")
    with pytest.raises(InvalidInput):
        console.read_int()
    console.discard_line()
    assert console.read_int() == 42


def test_out_of_range_int_is_invalid():
    console, _ = make_console("99999999999\n")
    with pytest.raises(InvalidInput):
        console.read_int()


def test_end_of_input_raises_eof():
    console, _ = make_console("   \n")
    with pytest.raises(EOFError):
        console.read_token()


def test_write_and_pause_output():
    console, saida = make_console("1\n")
    console.write("olá")
    console.pause()
    assert saida.getvalue() == "olá" + PAUSA_MENSAGEM
    assert console.read_int() == 1


def test_clear_calls_hook():
    cleared = []
    console, _ = make_console("", cleared)
    console.clear()
    console.clear()
    assert cleared == [True, True]