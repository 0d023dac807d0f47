import pytest

from arraykit.operations import (
    delete_at,
    find_position,
    format_elements,
    insert_at,
    update_at,
)


def test_delete_at_source_data():
    values = [1, 2, 30, 4, 5]
    assert delete_at(values, 3) == [1, 2, 4, 5]
    assert values == [1, 2, 30, 4, 5]


@pytest.mark.parametrize("position", [1, 2, 5])
def test_delete_then_insert_round_trip(position):
    values = [7, 8, 9, 10, 11]
    removed = values[position - 1]
    assert insert_at(delete_at(values, position), position, removed) == values


@pytest.mark.parametrize("position", [0, 6, -1])
def test_delete_at_out_of_range(position):
    with pytest.raises(IndexError):
        delete_at([1, 2, 3, 4, 5], position)


def test_insert_at_source_data():
    assert insert_at([16, 6, 8, 32, 12], 4, 99) == [16, 6, 8, 99, 32, 12]


def test_insert_at_ends():
    assert insert_at([1, 2], 1, 0) == [0, 1, 2]
    assert insert_at([1, 2], 3, 3) == [1, 2, 3]


@pytest.mark.parametrize("position", [0, 4])
def test_insert_at_out_of_range(position):
    with pytest.raises(IndexError):
        insert_at([1, 2], position, 5)


def test_update_at_source_data():
    values = [1, 2, 3, 4, 5]
    assert update_at(values, 3, 32) == [1, 2, 32, 4, 5]
    assert values == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("position", [0, 6])
def test_update_at_out_of_range(position):
    with pytest.raises(IndexError):
        update_at([1, 2, 3, 4, 5], position, 9)


def test_find_position_source_data():
    values = [1, 2, 50, 4, 5]
    position = find_position(values, 50)
    assert values[position - 1] == 50
    assert 50 not in values[:position - 1]


def test_find_position_first_match():
    assert find_position([4, 9, 4], 4) == 1


def test_find_position_missing():
    with pytest.raises(ValueError):
        find_position([1, 2, 3], 42)


def test_format_elements_source_data():
    assert format_elements([18, 20, 25, 6, 9]) == "18 20 25 6 9"


def test_format_elements_round_trip():
    values = [-3, 0, 12]
    assert [int(part) for part in format_elements(values).split()] == values


def test_format_elements_empty():
    assert format_elements([]) == ""