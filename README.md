# abrigos

Analyses a network of circular shelters on an integer grid. Two shelters are
connected when their circles touch or overlap. Given the positions of two
people, Ana and Bruno, the tool answers three questions:

1. **Part 1**: the fewest hops between a shelter containing Ana and a shelter
   containing Bruno (`-1` if no such route exists).
2. **Part 2**: the largest double-sweep BFS distance, in hops, found in any
   connected group of shelters.
3. **Part 3**: the critical shelters, meaning those whose removal would split
   a connected group (articulation points). The output gives their count
   followed by their 1-based indices in ascending order.

## Installation

```
pip install .
```

## Command line

The `abrigos` command reads whitespace-separated integers from standard input:

```
<ana_x> <ana_y>
<bruno_x> <bruno_y>
<number_of_shelters>
<radius> <x> <y>      (one line per shelter)
```

Example:

```
$ printf '0 0\n10 0\n3\n2 0 0\n3 5 0\n2 10 0\n' | abrigos
Parte 1: 2
Parte 2: 2
Parte 3: 1 2
```

The command takes no options other than `--help`. Missing values in the first
five numbers are read as `0`. If a value there is not an integer, the number
of shelters is negative, or a shelter line cannot be read, an error message is
written to standard error and the exit status is 1.

## Library use

```python
from abrigos.geometry import Shelter, Person
from abrigos.graph import build_graph, shortest_hops, max_diameter, critical_shelters
from abrigos.cli import parse_input, solve

shelters = [Shelter(2, 0, 0), Shelter(3, 5, 0), Shelter(2, 10, 0)]
graph = build_graph(shelters)           # [[1], [0, 2], [1]]

ana, bruno = Person(0, 0), Person(10, 0)
sources = [i for i, s in enumerate(shelters) if ana.is_inside(s)]
targets = [i for i, s in enumerate(shelters) if bruno.is_inside(s)]

shortest_hops(graph, sources, targets)  # 2 (None when unreachable)
max_diameter(graph)                     # 2
critical_shelters(graph)                # [1]  (0-based indices)

report = solve(ana, bruno, shelters)
print(report.format())
```

- `abrigos.geometry`: `Shelter(radius, x, y)` with `contains(x, y)` and
  `overlaps(other)`; `Person(x, y)` with `is_inside(shelter)`. Both are frozen
  dataclasses.
- `abrigos.graph`: `build_graph(shelters)` returns an adjacency list;
  `bfs_farthest(graph, start)` returns `(distance, node)` for the first node
  found farthest from `start`; `max_diameter`, `critical_shelters` and
  `shortest_hops` as above.
- `abrigos.cli`: `parse_input(text)` turns input text in the format above into
  `(ana, bruno, shelters)` and raises `InputError` (a `ValueError`) on
  malformed input; `solve(ana, bruno, shelters)` returns a `Report` with
  `hops`, `diameter` and `critical` (1-based), and `Report.format()` renders
  the three output lines; `main(argv=None)` runs the command and returns its
  exit status.

## Tests

```
pip install .[test]
pytest
```