"""
generate_tiles.py

Enumerate the connections of a diamond tile up to symmetry and write them out
as printable SVG pages.
"""

from __future__ import annotations

import math
import time

from ascii_pretty import format_pairs, render_connection, render_summary
from connections import connections, count_matchings
from equivalence import POLICIES
from svg_pages import save_pages

# ----------------------------
# Config
# ----------------------------

# Search input
NUM_PORTS = 8                  # ports on the tile boundary; a multiple of 4 for diamonds.
POLICY = "rotation_180"        # key of equivalence.POLICIES

# Tile geometry (inches / radians)
DIAMOND_SIDE = 2.5
SHORT_ANGLE = math.tau / 10

# Output
WRITE_SVG = True
OUTPUT_DIR = "ignore"
FILE_PREFIX = "diamond"

# Debug / output control
SHOW_ASCII = False
SHOW_PROGRESS = True
PROGRESS_INTERVAL = 10

# ANSI colors
_COLOR_RESET = "\033[0m"
_COLOR_START = "\033[36m"
_COLOR_OK = "\033[32m"
_COLOR_TRACE = "\033[34m"


# ----------------------------
# Helpers
# ----------------------------

def _print_header() -> None:
    print("=== Diamond tile connections ===")
    print(f"Ports: {NUM_PORTS}")
    print(f"Policy: {POLICY}")
    print(f"Diamond side: {DIAMOND_SIDE}")
    print(f"Short angle: {SHORT_ANGLE:.4f} rad")
    print(f"Write SVG: {WRITE_SVG}")
    if WRITE_SVG:
        print(f"Output dir: {OUTPUT_DIR}")
        print(f"File prefix: {FILE_PREFIX}")
    print(f"Show ascii: {SHOW_ASCII}")
    print(f"Show progress: {SHOW_PROGRESS}")
    if SHOW_PROGRESS:
        print(f"Progress interval: {PROGRESS_INTERVAL}")
    print()


def _print_connections(found) -> None:
    total = len(found)
    for idx, c in enumerate(found, start=1):
        if SHOW_ASCII:
            print(f"{_COLOR_START}[{idx} / {total}] {format_pairs(c)}{_COLOR_RESET}")
            print(render_connection(c))
            print()
        elif SHOW_PROGRESS and (idx == 1 or idx % max(PROGRESS_INTERVAL, 1) == 0 or idx == total):
            print(f"{_COLOR_TRACE}[{idx} / {total}] {format_pairs(c)}{_COLOR_RESET}")


# ----------------------------
# Main
# ----------------------------

def main() -> None:
    if POLICY not in POLICIES:
        raise ValueError(f"Unknown policy {POLICY!r}; expected one of {sorted(POLICIES)}")

    _print_header()

    t0 = time.perf_counter()
    found = connections(NUM_PORTS, POLICIES[POLICY])
    elapsed = time.perf_counter() - t0

    _print_connections(found)
    print()
    print(f"{_COLOR_OK}{render_summary(NUM_PORTS, POLICY, len(found), count_matchings(NUM_PORTS))}{_COLOR_RESET}")
    print(f"Search time: {elapsed * 1000:.2f} ms")

    if WRITE_SVG:
        paths = save_pages(
            found,
            OUTPUT_DIR,
            side_length=DIAMOND_SIDE,
            short_angle=SHORT_ANGLE,
            prefix=FILE_PREFIX,
        )
        print(f"Wrote {len(paths)} page(s):")
        for p in paths:
            print(f"  {p}")


if __name__ == "__main__":
    main()
