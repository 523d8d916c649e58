import pytest

from orthostar.core.errors import EmptyFrontier
from orthostar.core.frontier import Frontier
from orthostar.core.types import Cell


def make(row, col, f, h=0):
    return Cell(row, col, f=f, h=h, g=f - h)


def test_pops_lowest_f_first():
    fr = Frontier()
    for cell in (make(0, 0, 50), make(0, 1, 30), make(0, 2, 40)):
        fr.push(cell)
    assert [fr.pop_min().col for _ in range(3)] == [1, 2, 0]


def test_ties_prefer_lower_h_then_insertion_order():
    fr = Frontier()
    fr.push(make(0, 0, 40, h=20))
    fr.push(make(0, 1, 40, h=10))
    fr.push(make(0, 2, 40, h=20))
    assert [fr.pop_min().col for _ in range(3)] == [1, 0, 2]


def test_pop_empty_raises():
    fr = Frontier()
    with pytest.raises(EmptyFrontier):
        fr.pop_min()


def test_contains_and_len():
    fr = Frontier()
    a = make(1, 1, 10)
    assert a not in fr
    assert not fr
    fr.push(a)
    assert a in fr and fr.contains(a)
    assert Cell(1, 1) in fr  # identity is the coordinate
    assert len(fr) == 1
    fr.pop_min()
    assert a not in fr
    assert len(fr) == 0


def test_decrease_and_reorder_moves_cell_forward():
    fr = Frontier()
    a, b = make(0, 0, 50), make(0, 1, 40)
    fr.push(a)
    fr.push(b)
    a.f = 30
    fr.decrease_and_reorder(a)
    assert len(fr) == 2
    assert fr.pop_min() is a
    assert fr.pop_min() is b
    with pytest.raises(EmptyFrontier):
        fr.pop_min()  # stale entry for a is skipped, not returned


def test_push_twice_is_rejected():
    fr = Frontier()
    a = make(0, 0, 10)
    fr.push(a)
    with pytest.raises(ValueError):
        fr.push(a)


def test_positions():
    fr = Frontier()
    fr.push(make(2, 3, 10))
    fr.push(make(4, 5, 20))
    assert set(fr.positions()) == {(2, 3), (4, 5)}
