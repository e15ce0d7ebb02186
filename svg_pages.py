"""
svg_pages.py

Lay diamond tiles out on letter-sized pages and write them as SVG.

Units are inches throughout; the root element declares a matching viewBox so
the page prints at physical size. Tiles are placed on a fixed grid of slots
(5 columns x 3 rows), filled column by column.
"""

from __future__ import annotations

import math
import os
import xml.etree.ElementTree as ET
from typing import Iterable, Iterator, List, Optional, Sequence, TypeVar

from connections import Connection
from diamond_tile import DiamondTile, Vec, diamond_tile


WIDTH = 8.5
HEIGHT = 11.0
DIAMOND_SIDE = 2.5
SHORT_ANGLE = math.tau / 10
GRID_COLUMNS = 5
GRID_ROWS = 3

OUTLINE_STROKE = 1.0 / 96.0
CONNECTOR_STROKE = 0.1

SVG_NS = "http://www.w3.org/2000/svg"

T = TypeVar("T")


def _fmt(x: float) -> str:
    s = f"{x:.6f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _pt(p: Vec) -> str:
    return f"{_fmt(p[0])},{_fmt(p[1])}"


# ----------------------------
# Layout
# ----------------------------

def page_offsets(
    side_length: float = DIAMOND_SIDE,
    *,
    width: float = WIDTH,
    height: float = HEIGHT,
    columns: int = GRID_COLUMNS,
    rows: int = GRID_ROWS,
) -> List[Vec]:
    """
    Centres of the tile slots on one page, column-major. Columns are spaced by
    the horizontal extent of a thin diamond, rows by the side length.
    """
    if columns <= 0 or rows <= 0:
        raise ValueError("columns and rows must be positive")
    spacing = (side_length * math.cos(math.tau * 0.15), side_length)
    cx, cy = width / 2.0, height / 2.0
    col_mid = (columns - 1) / 2.0
    row_mid = (rows - 1) / 2.0
    return [
        (cx + spacing[0] * (x - col_mid), cy + spacing[1] * (y - row_mid))
        for x in range(columns)
        for y in range(rows)
    ]


def paginate(items: Iterable[T], per_page: int) -> Iterator[List[T]]:
    """Split items into consecutive pages of at most per_page entries."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    page: List[T] = []
    for item in items:
        page.append(item)
        if len(page) == per_page:
            yield page
            page = []
    if page:
        yield page


# ----------------------------
# SVG construction
# ----------------------------

def new_page(width: float = WIDTH, height: float = HEIGHT) -> ET.Element:
    return ET.Element(
        "svg",
        xmlns=SVG_NS,
        width=f"{_fmt(width)}in",
        height=f"{_fmt(height)}in",
        viewBox=f"0 0 {_fmt(width)} {_fmt(height)}",
    )


def outline_path_data(tile: DiamondTile) -> str:
    v0, v1, v2, v3 = tile.vertices
    return f"M{_pt(v0)} L{_pt(v1)} L{_pt(v2)} L{_pt(v3)} Z"


def tile_element(tile: DiamondTile, offset: Optional[Vec] = None) -> ET.Element:
    """
    A <g> holding the tile outline and one path per connector. Every port
    draws its own curve, so each chord appears twice, once per direction.
    """
    g = ET.Element("g")
    if offset is not None:
        g.set("transform", f"translate({_fmt(offset[0])}, {_fmt(offset[1])})")

    ET.SubElement(
        g,
        "path",
        fill="none",
        stroke="black",
        d=outline_path_data(tile),
        **{"stroke-width": _fmt(OUTLINE_STROKE)},
    )
    for conn in tile.connectors:
        d = f"M{_pt(conn.p0)} C{_pt(conn.p1)} {_pt(conn.p2)} {_pt(conn.p3)}"
        ET.SubElement(
            g,
            "path",
            fill="none",
            stroke="black",
            d=d,
            **{"stroke-width": _fmt(CONNECTOR_STROKE)},
        )
    return g


def build_page(tiles: Sequence[DiamondTile], offsets: Sequence[Vec]) -> ET.Element:
    if len(tiles) > len(offsets):
        raise ValueError(f"{len(tiles)} tiles do not fit in {len(offsets)} slots")
    doc = new_page()
    for tile, offset in zip(tiles, offsets):
        doc.append(tile_element(tile, offset))
    return doc


def build_pages(
    connections: Iterable[Connection],
    *,
    side_length: float = DIAMOND_SIDE,
    short_angle: float = SHORT_ANGLE,
) -> List[ET.Element]:
    """Render connections in order, filling as many pages as needed."""
    offsets = page_offsets(side_length)
    tiles = (diamond_tile(side_length, short_angle, c) for c in connections)
    return [build_page(page, offsets) for page in paginate(tiles, len(offsets))]


def save_pages(
    connections: Iterable[Connection],
    out_dir: str,
    *,
    side_length: float = DIAMOND_SIDE,
    short_angle: float = SHORT_ANGLE,
    prefix: str = "diamond",
) -> List[str]:
    """Write `{prefix}_{i}.svg` for each page into out_dir; return the paths."""
    os.makedirs(out_dir, exist_ok=True)
    paths: List[str] = []
    pages = build_pages(connections, side_length=side_length, short_angle=short_angle)
    for i, doc in enumerate(pages):
        path = os.path.join(out_dir, f"{prefix}_{i}.svg")
        ET.ElementTree(doc).write(path, encoding="utf-8", xml_declaration=True)
        paths.append(path)
    return paths

