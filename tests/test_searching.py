import pytest

from tradesort.records import DataEntry, parse_date
from tradesort.searching import (
    binary_interpolation_search,
    binary_search,
    count_entries,
    interpolation_search,
    matching_entries,
    modified_bis,
    sort_by_date,
)


def make(date, value=0, cumulative=0):
    return DataEntry(
        direction="Exports",
        year=2020,
        date=date,
        weekday="Monday",
        country="All",
        commodity="All",
        transport_mode="All",
        measure="$",
        value=value,
        cumulative=cumulative,
    )


DISTINCT = [make(d, i) for i, d in enumerate(
    ["01/01/2020", "02/01/2020", "03/01/2020", "04/01/2020", "05/02/2021"]
)]

WITH_DUPLICATES = [
    make("01/01/2020", 1),
    make("02/01/2020", 2),
    make("02/01/2020", 3),
    make("02/01/2020", 4),
    make("09/03/2020", 5),
]


def test_sort_by_date_orders_ascending():
    shuffled = [make("05/02/2021"), make("01/01/2020"), make("03/01/2020"),
                make("31/12/2019"), make("03/01/2020")]
    result = sort_by_date(shuffled)
    keys = [parse_date(e.date) for e in result]
    assert keys == sorted(keys)
    assert sorted(id(e) for e in result) == sorted(id(e) for e in shuffled)


def test_sort_by_date_does_not_modify_input():
    original = [make("02/01/2020"), make("01/01/2020")]
    sort_by_date(original)
    assert [e.date for e in original] == ["02/01/2020", "01/01/2020"]


def test_sort_by_date_empty():
    assert sort_by_date([]) == []


@pytest.mark.parametrize("entry", DISTINCT)
def test_binary_search_finds_each(entry):
    index = binary_search(DISTINCT, entry.date)
    assert DISTINCT[index] is entry


def test_binary_search_returns_leftmost_duplicate():
    index = binary_search(WITH_DUPLICATES, "02/01/2020")
    assert WITH_DUPLICATES[index].date == "02/01/2020"
    assert WITH_DUPLICATES[index - 1].date != "02/01/2020"


def test_binary_search_missing():
    assert binary_search(DISTINCT, "15/06/2020") is None
    assert binary_search([], "01/01/2020") is None


@pytest.mark.parametrize("entry", DISTINCT)
def test_interpolation_search_finds_each(entry):
    index = interpolation_search(DISTINCT, entry.date)
    assert DISTINCT[index] is entry


def test_interpolation_search_duplicates_leftmost():
    index = interpolation_search(WITH_DUPLICATES, "02/01/2020")
    assert index == binary_search(WITH_DUPLICATES, "02/01/2020")


def test_interpolation_search_missing_and_out_of_range():
    assert interpolation_search(DISTINCT, "15/06/2020") is None
    assert interpolation_search(DISTINCT, "01/01/1999") is None
    assert interpolation_search(DISTINCT, "01/01/2030") is None


def test_interpolation_search_single_date_range_is_not_probed():
    entries = [make("01/01/2020"), make("01/01/2020")]
    assert interpolation_search(entries, "01/01/2020") is None


@pytest.mark.parametrize("entry", DISTINCT)
def test_modified_bis_finds_each(entry):
    index, hits = modified_bis(DISTINCT, entry.date)
    assert DISTINCT[index] is entry
    assert hits == 1


def test_modified_bis_duplicates():
    index, hits = modified_bis(WITH_DUPLICATES, "02/01/2020")
    assert WITH_DUPLICATES[index].date == "02/01/2020"
    assert hits == 1


def test_modified_bis_missing():
    assert modified_bis(DISTINCT, "15/06/2020") == (None, 0)
    assert modified_bis([], "15/06/2020") == (None, 0)


@pytest.mark.parametrize("entry", DISTINCT)
def test_binary_interpolation_search_finds_each(entry):
    index, hits = binary_interpolation_search(DISTINCT, entry.date)
    assert DISTINCT[index] is entry
    assert hits >= 1


def test_binary_interpolation_search_single_entry():
    index, hits = binary_interpolation_search([make("07/07/2020")], "07/07/2020")
    assert index == 0
    assert hits == 1


def test_binary_interpolation_search_missing():
    assert binary_interpolation_search(DISTINCT, "15/06/2020") == (None, 0)
    assert binary_interpolation_search(DISTINCT, "01/01/2030") == (None, 0)


def test_count_entries():
    assert count_entries(WITH_DUPLICATES, "02/01/2020") == 3
    assert count_entries(WITH_DUPLICATES, "15/06/2020") == 0
    assert count_entries(WITH_DUPLICATES, "2/1/2020") == 3


def test_matching_entries_collects_whole_run():
    run = [e for e in WITH_DUPLICATES if e.date == "02/01/2020"]
    for index in (1, 2, 3):
        found = matching_entries(WITH_DUPLICATES, index, "02/01/2020")
        assert sorted(e.value for e in found) == sorted(e.value for e in run)
        assert found[0] is WITH_DUPLICATES[index]


def test_matching_entries_order_down_then_up():
    found = matching_entries(WITH_DUPLICATES, 2, "02/01/2020")
    assert found == [WITH_DUPLICATES[2], WITH_DUPLICATES[1], WITH_DUPLICATES[3]]


def test_matching_entries_count_agrees_with_count_entries():
    index = binary_search(WITH_DUPLICATES, "02/01/2020")
    found = matching_entries(WITH_DUPLICATES, index, "02/01/2020")
    assert len(found) == count_entries(WITH_DUPLICATES, "02/01/2020")


def test_invalid_search_date_raises():
    with pytest.raises(ValueError):
        binary_search(DISTINCT, "not-a-date")
    with pytest.raises(ValueError):
        count_entries(DISTINCT, "abc")