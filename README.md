# urna

An electronic voting booth that runs in the terminal. Voters register, log in
and cast one vote for president and one for governor. An administrator
authenticates with a password, which is checked against a stored SHA-256 hash,
and can then register and remove candidates. Anyone can view the results for
each office. The results show vote counts, percentages, a bar chart and the
winner.

## Installation

```
pip install .
```

## Running

```
urna
```

The program works in the current directory and keeps all of its state there:

- `eleitores.json` holds the registered voters and records whether each one
  has voted for each office.
- `candidatos.json` holds the candidates and their vote counts.
- `auditoria.log` records every action. Each line starts with a
  `[YYYY-MM-DD HH:MM:SS]` timestamp.
- `hash.txt` holds the hex SHA-256 hash of the administrator password. The
  administrator menu cannot be used until this file exists.

To create `hash.txt`, use `urna.security.hash_senha`:

```python
from pathlib import Path
from urna.security import hash_senha

Path("hash.txt").write_text(hash_senha("password"))
```

The main menu has no exit option. The program stops when its input ends or
when you press Ctrl+C. The program clears the screen by running
`clear || cls` through the shell. At a pause prompt it waits for Enter only
when input comes from a terminal.

## Main menu

1. **Cadastro**: registers a voter by name, CPF and age. A voter must be at
   least 16, and each CPF can be registered only once. Each new voter gets a
   random 12-digit voter number.
2. **Login**: logs in with name and CPF. Once logged in you can vote
   (president first, then governor, each with a confirmation step), list the
   candidates by office, by party or all at once, or go back to the main menu.
   Each voter can vote once per office.
3. **Resultado das Eleições**: shows the results for `Presidente` and
   `Governador`.
4. **Entrar como administrador**: asks for the password. Once it is accepted
   you can register candidates, who must be at least 35, or delete a candidate
   by voter number after confirming with `S`.

## Using it as a library

The modules can be used on their own:

- `urna.models`: the dataclasses `Cadastro`, `Candidato` and `Eleitor`.
  `Candidato` has `registrar_voto()`, `concorre_a(cargo)` and
  `mostrar_dados()`. The last one returns the candidate's card as text.
- `urna.storage`: `Storage(directory)` loads and saves the two JSON files with
  `load_eleitores`, `save_eleitores`, `load_candidatos` and `save_candidatos`.
  The module also has `eleitor_to_dict`, `eleitor_from_dict`,
  `candidato_to_dict` and `candidato_from_dict`. `gerar_titulo(rng)` generates
  voter numbers.
- `urna.results`:
  - `apurar(cargo, candidatos)` returns the candidates for an office, most
    votes first.
  - `formatar_resultado(cargo, candidatos, audit)` returns the result report
    for one office.
  - `listar_candidatos(candidatos)` returns a table of all candidates.
  - `resultado_eleicoes(console, storage, audit)` shows the full results
    screen.
- `urna.listing`: `filtrar_por_cargo`, `filtrar_por_partido`, `dados_logados`,
  and the `mostrar_candidatos` menu.
- `urna.voting`: `votando_presidente` and `votando_governador`.
- `urna.admin`: `adm`, `menu_admin`, `cadastrar_candidato` and
  `deletar_candidato`.
- `urna.app`: `logar`, `cadastrar_eleitor`, `voto`, `inicial` and `main`.
- `urna.security`: `hash_senha(senha)` and `Security(hash_path, audit)`, which
  has `autenticar(senha)` and `autenticar_admin(console)`.
- `urna.logger`: `AuditLog(path).log(mensagem)` appends a timestamped line to
  the log.
- `urna.console`: `Console(stdin, stdout, clear_screen)` reads words, lines
  and integers the way a whitespace-token stream does. It raises
  `InvalidInput` when the next input is not an integer and `EOFError` when
  input runs out. Because it takes its streams and its clear-screen function
  as arguments, the menus can be scripted.

## What it does not do

No sound is played when a vote is confirmed. Voter and candidate data are kept
only in the JSON files in the working directory. There is no database and no
network access.

## Tests

```
pip install .[test]
pytest
```