"""
connections.py

Enumerate the ways to pair up ports on a tile boundary, one connection per
equivalence class.

A connection on n ports is a tuple `c` with `c[i] == j` iff port i is joined
to port j. It is an involution without fixed points: c[c[i]] == i and
c[i] != i for every i.

The search is plain backtracking over a partial assignment. Whenever a full
connection is reached, its whole equivalence set (as reported by the supplied
policy) is checked against, and then added to, a ledger of connections already
accounted for. The first connection visited in each class is the one kept, so
the output depends only on the traversal order:
  - the lowest unassigned port is always paired next
  - its partner is tried in increasing port order

Run directly for a small demo:
    python connections.py
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple


Connection = Tuple[int, ...]
EquivalencePolicy = Callable[[Connection], Set[Connection]]


class InvalidArity(ValueError):
    """Raised when no perfect matching exists for the requested port count."""


# ----------------------------
# Ledger
# ----------------------------

class SeenSet:
    """
    Insert-only record of every connection already accounted for, either as an
    emitted representative or as a member of some representative's class.
    """

    def __init__(self) -> None:
        self._seen: Set[Connection] = set()

    def contains(self, connection: Connection) -> bool:
        return connection in self._seen

    def contains_any(self, connections: Iterable[Connection]) -> bool:
        return any(c in self._seen for c in connections)

    def insert_all(self, connections: Iterable[Connection]) -> None:
        self._seen.update(connections)

    def __contains__(self, connection: object) -> bool:
        return connection in self._seen

    def __len__(self) -> int:
        return len(self._seen)


# ----------------------------
# Validation helpers
# ----------------------------

def check_arity(num_ports) -> int:
    """Return num_ports if a perfect matching on that many ports exists."""
    if isinstance(num_ports, bool) or not isinstance(num_ports, int):
        raise InvalidArity(f"num_ports must be an int, got {num_ports!r}")
    if num_ports <= 0:
        raise InvalidArity(f"num_ports must be positive, got {num_ports}")
    if num_ports % 2:
        raise InvalidArity(f"num_ports must be even, got {num_ports}")
    return num_ports


def is_connection(candidate: Sequence[int]) -> bool:
    """True if candidate is a complete pairing: an involution with no fixed points."""
    n = len(candidate)
    if n % 2:
        return False
    for i, j in enumerate(candidate):
        if isinstance(j, bool) or not isinstance(j, int):
            return False
        if not (0 <= j < n) or j == i or candidate[j] != i:
            return False
    return True


def validate_connection(candidate: Sequence[int]) -> Connection:
    """
    Return candidate as a Connection tuple, raising ValueError naming the first
    port that breaks the pairing rules.
    """
    n = len(candidate)
    if n % 2:
        raise ValueError(f"Connection must cover an even number of ports, got {n}")
    for i, j in enumerate(candidate):
        if isinstance(j, bool) or not isinstance(j, int):
            raise ValueError(f"Port {i} has non-integer partner {j!r}")
        if not (0 <= j < n):
            raise ValueError(f"Port {i} has partner {j} outside range(0, {n})")
        if j == i:
            raise ValueError(f"Port {i} is connected to itself")
        if candidate[j] != i:
            raise ValueError(f"Port {i} -> {j} is not mirrored ({j} -> {candidate[j]})")
    return tuple(candidate)


def pairs(connection: Sequence[int]) -> List[Tuple[int, int]]:
    """Return the chords (i, j) with i < j, ordered by i."""
    return [(i, j) for i, j in enumerate(connection) if i < j]


def count_matchings(num_ports: int) -> int:
    """Number of perfect matchings on num_ports ports, (n-1)!!."""
    check_arity(num_ports)
    total = 1
    for k in range(num_ports - 1, 0, -2):
        total *= k
    return total


# ----------------------------
# Search
# ----------------------------

def _connections_helper(
    arr: List[Optional[int]],
    index: int,
    equivalents: EquivalencePolicy,
    seen: SeenSet,
) -> List[Connection]:
    if index == len(arr):
        connect: Connection = tuple(arr)  # type: ignore[arg-type]
        equiv = equivalents(connect)
        if seen.contains_any(equiv):
            return []
        seen.insert_all(equiv)
        return [connect]

    if arr[index] is not None:
        # already paired by an earlier port
        return _connections_helper(arr, index + 1, equivalents, seen)

    out: List[Connection] = []
    for i in range(index + 1, len(arr)):
        if arr[i] is None:
            arr[index] = i
            arr[i] = index
            out.extend(_connections_helper(arr, index + 1, equivalents, seen))
            arr[index] = None
            arr[i] = None
    return out


def connections(num_ports: int, equivalents: EquivalencePolicy) -> List[Connection]:
    """
    Return every way to connect num_ports ports two at a time, one
    representative per class of `equivalents`.

    `equivalents(c)` must return a set containing c, and the relation it
    describes must be reflexive, symmetric and transitive. This is not checked
    here (see equivalence.check_policy); a policy that breaks it gives wrong
    class counts rather than an error.
    """
    check_arity(num_ports)
    arr: List[Optional[int]] = [None] * num_ports
    seen = SeenSet()
    return _connections_helper(arr, 0, equivalents, seen)


def all_connections(num_ports: int) -> List[Connection]:
    """Every perfect matching on num_ports ports, in search order."""
    return connections(num_ports, lambda c: {c})


# ----------------------------
# Demo
# ----------------------------

def _demo() -> None:
    print("=== Demo: all connections on 4 ports ===")
    for c in all_connections(4):
        print(list(c), pairs(c))
    print()

    print("=== Demo: invalid arity ===")
    try:
        all_connections(3)
    except InvalidArity as ex:
        print("Caught expected error:", ex)
    print()


if __name__ == "__main__":
    _demo()
