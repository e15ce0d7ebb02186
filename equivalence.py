"""
equivalence.py

Equivalence policies for connections: which pairings of the ports count as
the same tile.

A policy maps a connection to the set of connections identified with it. The
set always contains the connection itself, and the relation must be a true
equivalence (reflexive, symmetric, transitive) for the enumerator in
connections.py to return each class exactly once.

Symmetries act by relabeling ports. If a symmetry sends port p to m(p), a
chord i-j becomes the chord m(i)-m(j), so the new connection c' satisfies
c'[m(i)] = m(c[i]).
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence, Set

from connections import Connection, EquivalencePolicy, all_connections


PortMap = Callable[[int], int]


class PolicyViolation(ValueError):
    """Raised by check_policy when a policy is not an equivalence relation."""


# ----------------------------
# Port relabeling
# ----------------------------

def relabel(connection: Sequence[int], mapping: Sequence[int]) -> Connection:
    """
    Apply a port relabeling. mapping[p] is the new label of port p and must be
    a permutation of range(len(connection)).
    """
    n = len(connection)
    if sorted(mapping) != list(range(n)):
        raise ValueError(f"mapping must be a permutation of range({n})")
    out = [0] * n
    for i, j in enumerate(connection):
        out[mapping[i]] = mapping[j]
    return tuple(out)


def rotate(connection: Sequence[int], steps: int) -> Connection:
    """Rotate the port ring forward by `steps` positions."""
    n = len(connection)
    if n == 0:
        return ()
    return relabel(connection, [(p + steps) % n for p in range(n)])


def reflect(connection: Sequence[int], axis: int = 0) -> Connection:
    """Reflect the port ring, sending port p to (axis - p) mod n."""
    n = len(connection)
    if n == 0:
        return ()
    return relabel(connection, [(axis - p) % n for p in range(n)])


# ----------------------------
# Policies
# ----------------------------

def identity(connection: Connection) -> Set[Connection]:
    """Every connection is its own class."""
    return {tuple(connection)}


def equivalent_rotation_180(connection: Connection) -> Set[Connection]:
    """
    Identify a connection with its half-turn: every port label is moved half
    way round the ring and the pairing structure is kept.
    """
    n = len(connection)
    split = n // 2
    rotated = tuple((connection[(i + split) % n] + split) % n for i in range(n))
    return {tuple(connection), rotated}


def rotation_group(connection: Connection) -> Set[Connection]:
    """Identify a connection with all of its rotations."""
    n = len(connection)
    return {tuple(connection)} | {rotate(connection, k) for k in range(n)}


def dihedral_group(connection: Connection) -> Set[Connection]:
    """Identify a connection with all of its rotations and reflections."""
    n = len(connection)
    out = rotation_group(connection)
    out.update(reflect(connection, k) for k in range(n))
    return out


def policy_from_maps(maps_for: Callable[[int], Iterable[PortMap]]) -> EquivalencePolicy:
    """
    Build a policy from a family of port maps. maps_for(n) yields functions on
    range(n); together with the identity they must already form a group, as
    no closure under composition is taken here.
    """

    def policy(connection: Connection) -> Set[Connection]:
        n = len(connection)
        out = {tuple(connection)}
        for f in maps_for(n):
            out.add(relabel(connection, [f(p) for p in range(n)]))
        return out

    return policy


POLICIES: Dict[str, EquivalencePolicy] = {
    "identity": identity,
    "rotation_180": equivalent_rotation_180,
    "rotation": rotation_group,
    "dihedral": dihedral_group,
}


# ----------------------------
# Optional validation (testing aid)
# ----------------------------

def check_policy(policy: EquivalencePolicy, num_ports: int) -> None:
    """
    Check that `policy` is an equivalence relation over every connection on
    num_ports ports. Raises PolicyViolation on the first failure found.

    This is exhaustive over (n-1)!! connections, so it is meant for tests and
    small n only.
    """
    universe = all_connections(num_ports)
    classes: Dict[Connection, Set[Connection]] = {}

    for c in universe:
        equiv = set(policy(c))
        if c not in equiv:
            raise PolicyViolation(f"Not reflexive: {list(c)} missing from its own class")
        for d in equiv:
            if len(d) != num_ports:
                raise PolicyViolation(f"{list(c)} is related to {list(d)} of a different size")
        classes[c] = equiv

    for c, equiv in classes.items():
        for d in equiv:
            if d not in classes:
                raise PolicyViolation(f"{list(c)} is related to {list(d)}, which is not a connection")
            if c not in classes[d]:
                raise PolicyViolation(f"Not symmetric: {list(c)} ~ {list(d)} but not back")
            if not classes[d] <= equiv:
                missing = sorted(classes[d] - equiv)[0]
                raise PolicyViolation(
                    f"Not transitive: {list(c)} ~ {list(d)} ~ {list(missing)} "
                    f"but {list(c)} !~ {list(missing)}"
                )


def class_of(connection: Connection, representatives: Iterable[Connection], policy: EquivalencePolicy) -> List[Connection]:
    """Return the representatives that `policy` identifies with `connection`."""
    equiv = policy(tuple(connection))
    return [r for r in representatives if r in equiv]
