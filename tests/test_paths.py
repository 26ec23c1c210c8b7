import pytest

from pathfinder.domain.errors import PredecessorCycleError
from pathfinder.graph.paths import reconstruct_path


PREDECESSORS = {"A": None, "B": "A", "C": "A", "D": "B", "X": None}


def test_source_to_itself_is_single_vertex():
    assert reconstruct_path(PREDECESSORS, "A", "A") == ["A"]


def test_source_to_itself_even_when_absent_from_map():
    assert reconstruct_path({}, "S", "S") == ["S"]


def test_full_path_is_source_to_target_inclusive():
    assert reconstruct_path(PREDECESSORS, "A", "D") == ["A", "B", "D"]
    assert reconstruct_path(PREDECESSORS, "A", "C") == ["A", "C"]


def test_unreachable_target_returns_none():
    assert reconstruct_path(PREDECESSORS, "A", "X") is None


def test_target_missing_from_map_returns_none():
    assert reconstruct_path(PREDECESSORS, "A", "F") is None


def test_chain_ending_before_source_returns_none_not_partial_path():
    # D's chain runs through B to A and never meets C.
    assert reconstruct_path(PREDECESSORS, "C", "D") is None


def test_predecessor_cycle_raises():
    predecessors = {"S": None, "A": "B", "B": "A"}

    with pytest.raises(PredecessorCycleError) as excinfo:
        reconstruct_path(predecessors, "S", "A")

    assert excinfo.value.vertex == "A"
