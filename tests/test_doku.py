import pytest

from veriyapilari.doku import Cell, Tissue


def test_cell_keeps_insertion_order():
    cell = Cell()
    for value in (30, 10, 20):
        cell.add(value)
    assert list(cell) == [30, 10, 20]
    assert len(cell) == 3


def test_cell_sort_orders_values():
    cell = Cell([305, 12, 7, 88, 12])
    cell.sort()
    assert list(cell) == sorted([305, 12, 7, 88, 12])
    assert len(cell) == 5


def test_cell_clear_empties_it():
    cell = Cell([1, 2, 3])
    cell.clear()
    assert len(cell) == 0
    assert list(cell) == []


def test_cell_str_follows_each_value_with_a_space():
    assert str(Cell([3, 1, 2])) == "3 1 2 "


def test_empty_cell_str_is_empty():
    assert str(Cell()) == ""


def test_tissue_takes_middle_of_odd_cell():
    tissue = Tissue()
    assert tissue.add_cell(Cell([1, 2, 3])) == 2
    assert list(tissue) == [2]


def test_tissue_takes_lower_middle_of_even_cell():
    tissue = Tissue()
    assert tissue.add_cell(Cell([1, 2, 3, 4])) == 2


def test_tissue_uses_cell_order_as_given():
    tissue = Tissue()
    cell = Cell([9, 1, 5])
    assert tissue.add_cell(cell) == 1
    cell.sort()
    assert tissue.add_cell(cell) == 5
    assert list(tissue) == [1, 5]


def test_tissue_single_value_cell():
    tissue = Tissue()
    assert tissue.add_cell(Cell([42])) == 42


def test_tissue_rejects_empty_cell():
    with pytest.raises(ValueError):
        Tissue().add_cell(Cell())


def test_tissue_len_str_and_clear():
    tissue = Tissue()
    tissue.add_cell(Cell([4]))
    tissue.add_cell(Cell([6, 8, 10]))
    assert len(tissue) == 2
    assert str(tissue) == "4 8 "
    tissue.clear()
    assert len(tissue) == 0
    assert str(tissue) == ""