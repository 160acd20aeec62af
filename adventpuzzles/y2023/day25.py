"""2023 day 25: Snowverload."""

import networkx as nx

NAME = "Snowverload"
NO_PUZZLE = "NO PUZZLE"

_EXPECTED_CUT = 3


def _wiring(text: str) -> nx.Graph:
    graph = nx.Graph()
    for line in text.splitlines():
        if not line.strip():
            continue
        left, sep, right = line.strip().partition(": ")
        if not sep:
            raise ValueError(f"malformed wiring {line!r}")
        for node in right.split():
            graph.add_edge(left, node)
    if graph.number_of_nodes() < 2 or not nx.is_connected(graph):
        raise ValueError("the wiring diagram must form one connected machine")
    return graph


def part1(text: str) -> int:
    """Cut the three wires splitting the machine and multiply the group sizes."""
    graph = _wiring(text)
    cut, (first, second) = nx.stoer_wagner(graph)
    if cut != _EXPECTED_CUT:
        raise ValueError(f"the minimum cut has {cut} wires, not {_EXPECTED_CUT}")
    return len(first) * len(second)


def part2(text: str) -> str:
    """Check the wiring diagram is readable; the day has no second puzzle."""
    _wiring(text)
    return NO_PUZZLE