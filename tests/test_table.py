"""
Unit tests for ShortestPathTable bookkeeping.
"""

import pytest

from sptree.exceptions import InputError
from sptree.table import ShortestPathTable


def test_new_table_is_unset():
    t = ShortestPathTable(3, 1)

    assert t.root == 1
    assert t.max_distance == 0
    assert t.furthest_vertex == 1
    assert t.distances() == [None, None, None]
    assert not any(t.visited(v) for v in range(3))


def test_visit_tracks_strictly_larger_distance():
    t = ShortestPathTable(3, 0)
    t.set(0, 0, None)
    t.set(1, 4, 0)
    t.set(2, 4, 0)
    for v in range(3):
        t.visit(v)

    # equal distance does not replace the first furthest vertex
    assert t.max_distance == 4
    assert t.furthest_vertex == 1


def test_path_to_follows_parents():
    t = ShortestPathTable(4, 0)
    t.set(0, 0, None)
    t.set(1, 1, 0)
    t.set(2, 2, 1)

    assert t.path_to(2) == [0, 1, 2]
    assert t.path_to(0) == [0]
    assert t.path_to(3) == []


def test_root_out_of_range():
    with pytest.raises(InputError):
        ShortestPathTable(2, 2)


def test_accessors_validate_vertex():
    t = ShortestPathTable(2, 0)
    with pytest.raises(InputError):
        t.distance(2)
    with pytest.raises(InputError):
        t.parent(-1)
    with pytest.raises(InputError):
        t.visited(5)


def test_str_renders_unset_cells():
    t = ShortestPathTable(2, 0)
    t.set(0, 0, None)
    t.visit(0)
    lines = str(t).splitlines()

    assert lines[0].split() == ["Vertex", "Visited", "Distance", "Parent"]
    assert lines[1].split() == ["0", "true", "0", "-"]
    assert lines[2].split() == ["1", "false", "-", "-"]


@pytest.mark.parametrize("root", ["a", 1.0, None, True])
def test_root_must_be_an_integer(root):
    with pytest.raises(InputError, match="must be an integer"):
        ShortestPathTable(3, root)
