# ascii_pretty.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from connections import pairs, validate_connection

_LABELS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ123456789"


def _label_for(k: int) -> str:
    return _LABELS[k] if k < len(_LABELS) else _LABELS[k % len(_LABELS)]


def format_pairs(connection: Sequence[int]) -> str:
    """Chords as "(0 1)(2 3)", lower port first, ordered by lower port."""
    return "".join(f"({i} {j})" for i, j in pairs(connection))


def chord_labels(connection: Sequence[int]) -> List[str]:
    """One letter per port; both ends of a chord share a letter."""
    labels: Dict[int, str] = {}
    for k, (i, j) in enumerate(pairs(connection)):
        labels[i] = labels[j] = _label_for(k)
    return [labels[p] for p in range(len(connection))]


def render_connection(connection: Sequence[int], *, title: Optional[str] = None) -> str:
    """
    Two aligned rows: port numbers, then the chord letter at each port.

        port  0 1 2 3
        chord a a b b
    """
    connection = validate_connection(connection)
    n = len(connection)
    width = max(len(str(n - 1)), 1) if n else 1

    ports = " ".join(str(p).rjust(width) for p in range(n))
    chords = " ".join(lbl.rjust(width) for lbl in chord_labels(connection))

    lines: List[str] = []
    if title is not None:
        lines.append(title)
    lines.append(f"port  {ports}")
    lines.append(f"chord {chords}")
    return "\n".join(lines)


def render_summary(num_ports: int, policy_name: str, num_classes: int, num_matchings: int) -> str:
    return (
        f"{num_classes} classes of connections on {num_ports} ports "
        f"under {policy_name!r} ({num_matchings} matchings in total)"
    )
