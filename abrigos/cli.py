"""Read people and shelters, then report routes, reach and critical shelters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from .geometry import Person, Shelter
from .graph import build_graph, critical_shelters, max_diameter, shortest_hops


class InputError(ValueError):
    """Raised when the input cannot be read."""


@dataclass
class Report:
    """The three answers: hops between Ana and Bruno, diameter, critical shelters."""

    hops: int | None
    diameter: int
    critical: list[int] = field(default_factory=list)

    def format(self) -> str:
        """Render the report as its three output lines."""
        hops = -1 if self.hops is None else self.hops
        third = " ".join(str(value) for value in [len(self.critical), *self.critical])
        return f"Parte 1: {hops}\nParte 2: {self.diameter}\nParte 3: {third}"


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputError(f"Valor inválido: {token!r}") from None


def parse_input(text: str) -> tuple[Person, Person, list[Shelter]]:
    """Parse Ana, Bruno and the shelter list from whitespace-separated text."""
    tokens = iter(text.split())
    header = [_to_int(token) for _, token in zip(range(5), tokens)]
    header += [0] * (5 - len(header))
    ana = Person(header[0], header[1])
    bruno = Person(header[2], header[3])
    count = header[4]
    if count < 0:
        raise InputError(f"Número de abrigos inválido: {count}")

    shelters = []
    for index in range(count):
        fields = [token for _, token in zip(range(3), tokens)]
        try:
            radius, x, y = (int(token) for token in fields)
        except ValueError:
            raise InputError(f"Erro ao ler dados do abrigo {index}") from None
        shelters.append(Shelter(radius, x, y))
    return ana, bruno, shelters


def solve(ana: Person, bruno: Person, shelters: Sequence[Shelter]) -> Report:
    """Compute the report for the given people and shelters."""
    graph = build_graph(shelters)
    ana_shelters = [i for i, s in enumerate(shelters) if ana.is_inside(s)]
    bruno_shelters = [i for i, s in enumerate(shelters) if bruno.is_inside(s)]
    return Report(
        hops=shortest_hops(graph, ana_shelters, bruno_shelters),
        diameter=max_diameter(graph),
        critical=[index + 1 for index in critical_shelters(graph)],
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read the problem from standard input and print the report."""
    parser = argparse.ArgumentParser(
        prog="abrigos",
        description="Read people and shelters from standard input and report on them.",
    )
    parser.parse_args(argv)
    try:
        ana, bruno, shelters = parse_input(sys.stdin.read())
    except InputError as error:
        print(error, file=sys.stderr)
        return 1
    print(solve(ana, bruno, shelters).format())
    return 0