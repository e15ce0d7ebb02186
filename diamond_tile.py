"""
diamond_tile.py

Geometry of a diamond (rhombus) tile carrying a connection.

The rhombus is centred on the origin with vertices walked in order
V0 -> V1 -> V2 -> V3 -> V0:

    V0 = -(straight + angled) / 2      (acute corner)
    V1 = V0 + straight                 (obtuse corner)
    V2 = V1 + angled                   (acute corner)
    V3 = V0 + angled                   (obtuse corner)

where `straight = (0, side)` and `angled` is `straight` turned clockwise by
the short angle. Ports are spread evenly along the sides in walking order,
n/4 per side, so for n = 8 they sit at the 1/4 and 3/4 points.

Each chord of the connection becomes a cubic Bezier curve leaving its ports
along the inward normal. Ports near an acute corner get a short lead-in so the
curve does not run into the narrow corner.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from connections import Connection, validate_connection


Vec = Tuple[float, float]

ACUTE_SCALE = 0.15
OBTUSE_SCALE = 0.5


# ----------------------------
# Vector helpers
# ----------------------------

def _add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def _sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def _scale(a: Vec, k: float) -> Vec:
    return (a[0] * k, a[1] * k)


def _rotate(a: Vec, angle: float) -> Vec:
    c, s = math.cos(angle), math.sin(angle)
    return (a[0] * c - a[1] * s, a[0] * s + a[1] * c)


def _normalize(a: Vec) -> Vec:
    length = math.hypot(a[0], a[1])
    if length == 0:
        raise ValueError("Cannot normalize a zero vector")
    return (a[0] / length, a[1] / length)


# ----------------------------
# Tile model
# ----------------------------

@dataclass(frozen=True)
class Connector:
    """Cubic Bezier from port `start` to port `end`."""

    start: int
    end: int
    p0: Vec
    p1: Vec
    p2: Vec
    p3: Vec


@dataclass(frozen=True)
class DiamondTile:
    side_length: float
    short_angle: float
    connection: Connection
    vertices: Tuple[Vec, Vec, Vec, Vec]
    ports: Tuple[Vec, ...]
    normals: Tuple[Vec, ...]
    connectors: Tuple[Connector, ...]

    def unique_connectors(self) -> Iterator[Connector]:
        """Each chord once, drawn from its lower port."""
        for conn in self.connectors:
            if conn.start < conn.end:
                yield conn


def _corner_scale(vertex_index: int) -> float:
    # even vertices are the acute corners
    return ACUTE_SCALE if vertex_index % 2 == 0 else OBTUSE_SCALE


def _side_fractions(per_side: int) -> List[float]:
    return [(k + 0.5) / per_side for k in range(per_side)]


def port_layout(side_length: float, short_angle: float, num_ports: int) -> Tuple[
    Tuple[Vec, Vec, Vec, Vec], List[Vec], List[Vec]
]:
    """
    Return (vertices, ports, inward normals) for a diamond with num_ports ports.
    Normals are already scaled by the lead-in length for their port.
    """
    if num_ports <= 0 or num_ports % 4:
        raise ValueError(f"Diamond tiles need a positive multiple of 4 ports, got {num_ports}")
    if side_length <= 0:
        raise ValueError("side_length must be positive")
    if not (0 < short_angle < math.pi / 2):
        raise ValueError("short_angle must lie strictly between 0 and pi/2")

    straight: Vec = (0.0, side_length)
    angled = _rotate(straight, -short_angle)
    v0 = _scale(_add(straight, angled), -0.5)
    v1 = _add(v0, straight)
    v2 = _add(v1, angled)
    v3 = _add(v0, angled)
    vertices = (v0, v1, v2, v3)

    per_side = num_ports // 4
    ports: List[Vec] = []
    normals: List[Vec] = []
    for s in range(4):
        start = vertices[s]
        end = vertices[(s + 1) % 4]
        direction = _sub(end, start)
        unit = _normalize(direction)
        # inward normal: a quarter turn of the reversed side direction
        inward = _rotate(_scale(unit, -1.0), math.tau / 4)
        for t in _side_fractions(per_side):
            ports.append(_add(start, _scale(direction, t)))
            if t < 0.5:
                k = _corner_scale(s)
            elif t > 0.5:
                k = _corner_scale(s + 1)
            else:
                k = (ACUTE_SCALE + OBTUSE_SCALE) / 2
            normals.append(_scale(inward, k))

    return vertices, ports, normals


def diamond_tile(side_length: float, short_angle: float, connection: Sequence[int]) -> DiamondTile:
    """Lay out `connection` on a diamond with the given side and acute angle."""
    connection = validate_connection(connection)
    vertices, ports, normals = port_layout(side_length, short_angle, len(connection))

    connectors: List[Connector] = []
    for i0, i1 in enumerate(connection):
        p0 = ports[i0]
        p3 = ports[i1]
        connectors.append(
            Connector(
                start=i0,
                end=i1,
                p0=p0,
                p1=_add(p0, normals[i0]),
                p2=_add(p3, normals[i1]),
                p3=p3,
            )
        )

    return DiamondTile(
        side_length=side_length,
        short_angle=short_angle,
        connection=connection,
        vertices=vertices,
        ports=tuple(ports),
        normals=tuple(normals),
        connectors=tuple(connectors),
    )
