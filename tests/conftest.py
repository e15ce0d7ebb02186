from __future__ import annotations

from itertools import permutations
from typing import List

import pytest

from connections import Connection, is_connection


def brute_force_matchings(num_ports: int) -> List[Connection]:
    """Every perfect matching, found by filtering all permutations."""
    return sorted(p for p in permutations(range(num_ports)) if is_connection(p))


@pytest.fixture(scope="session")
def matchings_by_size():
    return {n: brute_force_matchings(n) for n in (2, 4, 6, 8)}
