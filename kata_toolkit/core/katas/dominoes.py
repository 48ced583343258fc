from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def can_dominoes_make_row(dominoes: Iterable[Sequence[int]]) -> bool:
    """Return True if every tile can be laid in a single row.

    A tile [a, b] may be flipped. The row exists exactly when the tiles form a
    connected graph over their values with at most two odd-degree values.
    """
    tiles = [(a, b) for a, b in dominoes]
    if not tiles:
        return True

    degree: Counter[int] = Counter()
    parent: dict[int, int] = {}

    def find(v: int) -> int:
        parent.setdefault(v, v)
        while parent[v] != v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    for a, b in tiles:
        degree[a] += 1
        degree[b] += 1
        parent[find(a)] = find(b)

    roots = {find(v) for v in degree}
    if len(roots) > 1:
        return False

    odd = sum(1 for d in degree.values() if d % 2)
    return odd <= 2
