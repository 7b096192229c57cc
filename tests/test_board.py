"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    ASCENTS,
    DESCENTS,
    REFERENCE_TOPOLOGY,
    BoardTopology,
    ConfigurationError,
)


# ── reference configuration ──────────────────────────────────────────

def test_reference_has_9_ascents():
    assert len(REFERENCE_TOPOLOGY.ascents) == 9


def test_reference_has_10_descents():
    assert len(REFERENCE_TOPOLOGY.descents) == 10


def test_all_squares_in_range():
    for mapping in (DESCENTS, ASCENTS):
        for sq, dest in mapping.items():
            assert 1 <= sq <= 100
            assert 1 <= dest <= 100


def test_reference_dimensions():
    assert REFERENCE_TOPOLOGY.size == 100
    assert REFERENCE_TOPOLOGY.row_width == 10


def test_descent_of():
    assert REFERENCE_TOPOLOGY.descent_of(16) == 6
    assert REFERENCE_TOPOLOGY.descent_of(98) == 78
    assert REFERENCE_TOPOLOGY.descent_of(50) is None
    assert REFERENCE_TOPOLOGY.descent_of(1) is None     # ascent, not descent


def test_ascent_of():
    assert REFERENCE_TOPOLOGY.ascent_of(1) == 38
    assert REFERENCE_TOPOLOGY.ascent_of(80) == 100
    assert REFERENCE_TOPOLOGY.ascent_of(50) is None
    assert REFERENCE_TOPOLOGY.ascent_of(16) is None     # descent, not ascent


def test_predicates():
    assert REFERENCE_TOPOLOGY.is_descent(47) is True
    assert REFERENCE_TOPOLOGY.is_descent(28) is False
    assert REFERENCE_TOPOLOGY.is_ascent(28) is True
    assert REFERENCE_TOPOLOGY.is_ascent(47) is False


def test_topology_is_read_only():
    with pytest.raises(TypeError):
        REFERENCE_TOPOLOGY.descents[50] = 2  # type: ignore[index]


def test_topology_copies_its_input():
    descents = {16: 6}
    topo = BoardTopology(descents=descents, ascents={})
    descents[17] = 3
    assert topo.descent_of(17) is None


# ── validation ───────────────────────────────────────────────────────

def test_custom_topology_accepted():
    topo = BoardTopology(descents={16: 6}, ascents={80: 100})
    assert topo.descent_of(16) == 6
    assert topo.ascent_of(80) == 100


def test_shared_origin_rejected():
    with pytest.raises(ConfigurationError, match="both"):
        BoardTopology(descents={30: 10}, ascents={30: 50})


def test_descent_must_go_down():
    with pytest.raises(ConfigurationError, match="does not go down"):
        BoardTopology(descents={30: 40}, ascents={})


def test_ascent_must_go_up():
    with pytest.raises(ConfigurationError, match="does not go up"):
        BoardTopology(descents={}, ascents={30: 20})


def test_final_square_cannot_be_origin():
    with pytest.raises(ConfigurationError, match="final square"):
        BoardTopology(descents={100: 50}, ascents={})


def test_off_board_square_rejected():
    with pytest.raises(ConfigurationError, match="leaves the board"):
        BoardTopology(descents={}, ascents={95: 120})
    with pytest.raises(ConfigurationError, match="leaves the board"):
        BoardTopology(descents={5: 0}, ascents={})


def test_chained_shortcut_rejected():
    """A destination that is itself an origin would need a second resolution."""
    with pytest.raises(ConfigurationError, match="themselves shortcut origins"):
        BoardTopology(descents={40: 20}, ascents={20: 60})


def test_bad_dimensions_rejected():
    with pytest.raises(ConfigurationError):
        BoardTopology(size=1, row_width=1, descents={}, ascents={})
    with pytest.raises(ConfigurationError, match="does not divide"):
        BoardTopology(size=100, row_width=7, descents={}, ascents={})


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_topology_is_hashable():
    assert hash(BoardTopology()) == hash(REFERENCE_TOPOLOGY)
    assert BoardTopology() == REFERENCE_TOPOLOGY
    assert len({REFERENCE_TOPOLOGY, BoardTopology(descents={16: 6}, ascents={})}) == 2
