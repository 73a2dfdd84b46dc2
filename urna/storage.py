"""JSON persistence of voters and candidates."""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Iterable

from urna.models import Candidato, Eleitor

ELEITORES_ARQUIVO = "eleitores.json"
CANDIDATOS_ARQUIVO = "candidatos.json"


def _campo(data: dict[str, Any], chave: str, tipo: type) -> Any:
    valor = data[chave]
    if tipo is int and isinstance(valor, bool):
        raise TypeError(f"campo {chave!r} deve ser {tipo.__name__}")
    if not isinstance(valor, tipo):
        raise TypeError(f"campo {chave!r} deve ser {tipo.__name__}")
    return valor


def _opcional_bool(data: dict[str, Any], chave: str) -> bool:
    if chave not in data:
        return False
    return _campo(data, chave, bool)


def eleitor_to_dict(eleitor: Eleitor) -> dict[str, Any]:
    """Return the JSON object for a voter."""
    return {
        "nome": eleitor.nome,
        "cpf": eleitor.cpf,
        "idade": eleitor.idade,
        "num_eleitor": eleitor.num_eleitor,
        "votou_presidente": eleitor.votou_presidente,
        "votou_governador": eleitor.votou_governador,
    }


def eleitor_from_dict(data: dict[str, Any]) -> Eleitor:
    """Build a voter from its JSON object; vote flags default to False."""
    return Eleitor(
        nome=_campo(data, "nome", str),
        cpf=_campo(data, "cpf", str),
        idade=_campo(data, "idade", int),
        num_eleitor=_campo(data, "num_eleitor", str),
        votou_presidente=_opcional_bool(data, "votou_presidente"),
        votou_governador=_opcional_bool(data, "votou_governador"),
    )


def candidato_to_dict(candidato: Candidato) -> dict[str, Any]:
    """Return the JSON object for a candidate."""
    return {
        "nome": candidato.nome,
        "cpf": candidato.cpf,
        "idade": candidato.idade,
        "num_eleitor": candidato.num_eleitor,
        "numero": candidato.numero,
        "nome_urna": candidato.nome_urna,
        "partido": candidato.partido,
        "cargo": candidato.cargo,
        "votos": candidato.votos,
    }


def candidato_from_dict(data: dict[str, Any]) -> Candidato:
    """Build a candidate from its JSON object; every field is required."""
    return Candidato(
        nome=_campo(data, "nome", str),
        cpf=_campo(data, "cpf", str),
        idade=_campo(data, "idade", int),
        num_eleitor=_campo(data, "num_eleitor", str),
        numero=_campo(data, "numero", int),
        nome_urna=_campo(data, "nome_urna", str),
        partido=_campo(data, "partido", str),
        cargo=_campo(data, "cargo", str),
        votos=_campo(data, "votos", int),
    )


def gerar_titulo(rng: random.Random | None = None) -> str:
    """Return a random 12-digit voter number whose first digit is not zero."""
    rng = rng or random.Random()
    primeiro = str(rng.randint(1, 9))
    return primeiro + "".join(str(rng.randint(0, 9)) for _ in range(11))


class Storage:
    """Reads and writes the voter and candidate files in one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.eleitores_path = self.directory / ELEITORES_ARQUIVO
        self.candidatos_path = self.directory / CANDIDATOS_ARQUIVO

    @staticmethod
    def _ler_lista(caminho: Path) -> list[Any]:
        try:
            texto = caminho.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        if not texto.strip():
            return []
        dados = json.loads(texto)
        if not dados or not isinstance(dados, list):
            return []
        return dados

    @staticmethod
    def _gravar_lista(caminho: Path, itens: list[dict[str, Any]]) -> None:
        caminho.write_text(
            json.dumps(itens, indent=4, sort_keys=True, ensure_ascii=False),
            encoding="utf-8",
        )

    def load_eleitores(self) -> list[Eleitor]:
        """Return the stored voters, or an empty list if there are none."""
        return [eleitor_from_dict(item) for item in self._ler_lista(self.eleitores_path)]

    def save_eleitores(self, eleitores: Iterable[Eleitor]) -> None:
        """Replace the stored voters with ``eleitores``."""
        self._gravar_lista(self.eleitores_path, [eleitor_to_dict(e) for e in eleitores])

    def load_candidatos(self) -> list[Candidato]:
        """Return the stored candidates, or an empty list if there are none."""
        return [candidato_from_dict(item) for item in self._ler_lista(self.candidatos_path)]

    def save_candidatos(self, candidatos: Iterable[Candidato]) -> None:
        """Replace the stored candidates with ``candidatos``."""
        self._gravar_lista(self.candidatos_path, [candidato_to_dict(c) for c in candidatos])