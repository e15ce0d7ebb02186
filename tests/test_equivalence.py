from __future__ import annotations

import pytest

from connections import all_connections, connections
from equivalence import (
    POLICIES,
    PolicyViolation,
    check_policy,
    class_of,
    dihedral_group,
    equivalent_rotation_180,
    identity,
    policy_from_maps,
    reflect,
    relabel,
    rotate,
    rotation_group,
)


# ----------------------------
# Relabeling
# ----------------------------

def test_relabel_identity_mapping():
    c = (3, 2, 1, 0)
    assert relabel(c, [0, 1, 2, 3]) == c


def test_relabel_rejects_non_permutation():
    with pytest.raises(ValueError):
        relabel((1, 0, 3, 2), [0, 0, 1, 2])


def test_rotate_quarter_turn_on_four_ports():
    assert rotate((1, 0, 3, 2), 1) == (3, 2, 1, 0)
    assert rotate((2, 3, 0, 1), 1) == (2, 3, 0, 1)


def test_rotate_full_turn_is_identity():
    for c in all_connections(6):
        assert rotate(c, 6) == c


def test_reflect_is_involutive():
    for c in all_connections(6):
        assert reflect(reflect(c, 1), 1) == c


# ----------------------------
# Half-turn policy
# ----------------------------

def test_rotation_180_matches_half_ring_relabel():
    for c in all_connections(8):
        assert equivalent_rotation_180(c) == {c, rotate(c, 4)}


def test_rotation_180_on_four_ports_fixes_everything():
    # On a 4-port ring a half turn maps each of the three pairings to itself.
    for c in [(1, 0, 3, 2), (2, 3, 0, 1), (3, 2, 1, 0)]:
        assert equivalent_rotation_180(c) == {c}
    assert connections(4, equivalent_rotation_180) == [(1, 0, 3, 2), (2, 3, 0, 1), (3, 2, 1, 0)]


def test_rotation_180_on_eight_ports():
    # 105 matchings, 25 of them fixed by the half turn: (105 + 25) / 2 classes.
    found = connections(8, equivalent_rotation_180)
    assert len(found) == 65
    fixed = [c for c in all_connections(8) if equivalent_rotation_180(c) == {c}]
    assert len(fixed) == 25


def test_rotation_180_representative_is_first_visited():
    found = connections(8, equivalent_rotation_180)
    for c in found:
        assert c == min(equivalent_rotation_180(c))


# ----------------------------
# Rotation and dihedral groups
# ----------------------------

def test_full_rotation_on_four_ports():
    assert connections(4, rotation_group) == [(1, 0, 3, 2), (2, 3, 0, 1)]
    assert connections(4, dihedral_group) == [(1, 0, 3, 2), (2, 3, 0, 1)]


def test_rotation_and_dihedral_on_six_ports():
    assert len(connections(6, rotation_group)) == 5
    assert len(connections(6, dihedral_group)) == 5


def test_policy_from_maps_half_turn():
    half_turn = policy_from_maps(lambda n: [lambda p, n=n: (p + n // 2) % n])
    assert connections(8, half_turn) == connections(8, equivalent_rotation_180)


# ----------------------------
# Class properties for every shipped policy
# ----------------------------

@pytest.mark.parametrize("name", sorted(POLICIES))
@pytest.mark.parametrize("n", [2, 4, 6, 8])
def test_representatives_pairwise_distinct(name, n):
    policy = POLICIES[name]
    found = connections(n, policy)
    for i, a in enumerate(found):
        equiv = policy(a)
        for b in found[i + 1:]:
            assert b not in equiv


@pytest.mark.parametrize("name", sorted(POLICIES))
@pytest.mark.parametrize("n", [2, 4, 6, 8])
def test_every_matching_has_exactly_one_representative(name, n, matchings_by_size):
    policy = POLICIES[name]
    found = connections(n, policy)
    for m in matchings_by_size[n]:
        assert len(class_of(m, found, policy)) == 1


@pytest.mark.parametrize("name", sorted(POLICIES))
def test_shipped_policies_pass_check(name):
    for n in (2, 4, 6):
        check_policy(POLICIES[name], n)


@pytest.mark.parametrize("name", sorted(POLICIES))
def test_policies_are_deterministic(name):
    assert connections(8, POLICIES[name]) == connections(8, POLICIES[name])


# ----------------------------
# check_policy failures
# ----------------------------

def test_check_policy_rejects_missing_self():
    with pytest.raises(PolicyViolation, match="Not reflexive"):
        check_policy(lambda c: {rotate(c, 1)}, 6)


def test_check_policy_rejects_one_way_relation():
    with pytest.raises(PolicyViolation, match="Not symmetric"):
        check_policy(lambda c: {c, rotate(c, 1)}, 6)


def test_check_policy_rejects_non_transitive_relation():
    def neighbours(c):
        return {c, rotate(c, 1), rotate(c, -1)}

    with pytest.raises(PolicyViolation, match="Not transitive"):
        check_policy(neighbours, 6)


def test_identity_policy():
    assert identity((1, 0)) == {(1, 0)}
