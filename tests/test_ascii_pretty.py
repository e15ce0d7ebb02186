from __future__ import annotations

import pytest

from ascii_pretty import chord_labels, format_pairs, render_connection, render_summary


def test_format_pairs():
    assert format_pairs((1, 0, 3, 2)) == "(0 1)(2 3)"
    assert format_pairs((3, 2, 1, 0)) == "(0 3)(1 2)"


def test_chord_labels_share_letters():
    assert chord_labels((3, 2, 1, 0)) == ["a", "b", "b", "a"]
    assert chord_labels((2, 3, 0, 1)) == ["a", "b", "a", "b"]


def test_render_connection():
    assert render_connection((1, 0, 3, 2)) == "port  0 1 2 3\nchord a a b b"


def test_render_connection_with_title_and_wide_ports():
    c = tuple(range(11, -1, -1))
    lines = render_connection(c, title="reversed").splitlines()
    assert lines[0] == "reversed"
    assert lines[1].startswith("port   0  1")
    assert lines[2].endswith(" b  a")


def test_render_connection_rejects_bad_input():
    with pytest.raises(ValueError):
        render_connection((0, 1))


def test_render_summary():
    s = render_summary(8, "rotation_180", 65, 105)
    assert "65 classes" in s
    assert "'rotation_180'" in s
    assert "105 matchings" in s
