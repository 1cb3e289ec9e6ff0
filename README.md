# tradesort

Classic sorting, searching and hashing algorithms applied to a CSV file of
trade-effects records (direction, year, date, weekday, country, commodity,
transport mode, measure, value and cumulative value).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Input data

Every command reads `effects.csv` from the current directory unless
`--input PATH` names another file. The first line is a header and is
skipped. Each following line holds ten comma-separated fields; when a line
contains a double quote, the commodity field is read as a quoted field that
may contain commas. A line that does not parse stops the program with an
error message and exit status 1.

## Commands

All three commands are interactive and read their menu choices from
standard input.

### `tradesort-sort`

```
tradesort-sort [--input effects.csv] [--output sorted_entries.txt] [--by value|cumulative]
```

Offers two algorithms and a "Terminate" option:

- `--by value` (the default): counting sort or merge sort on the value field;
- `--by cumulative`: heap sort or quick sort on the cumulative field.

The records are written to the output file (default `sorted_entries.txt`),
one per line separated by `; `, followed by one
`Error: Entries are not sorted correctly` line for each neighbouring pair
found out of order and a final `Errors: N` line. With `--by value` an
invalid menu choice still writes the report of the unsorted records; with
`--by cumulative` it ends the program with status 1. Counting sort fails
with an error if any value is negative. On Windows the report is opened in
Notepad; elsewhere you are asked to open it yourself.

### `tradesort-search`

```
tradesort-search [--input effects.csv] [--suite basic|bis]
```

Sorts the records by date and looks up a date given as `DD/MM/YYYY`:

- `--suite basic` (the default): binary search or interpolation search;
- `--suite bis`: modified binary interpolation search or binary
  interpolation search.

When a match is found you choose to print the value, the cumulative value
or both for every record with that date, and the number of entries found is
printed. With the `bis` suite that number also includes the hits the search
itself counted. The menu repeats until you answer `0` to the continue
prompt or input ends.

### `tradesort-hash`

```
tradesort-hash [--input effects.csv]
```

A menu over a chained hash table of 11 buckets keyed by date: search for a
record, modify its value, delete it, or exit.

## Library use

```python
from tradesort.records import read_entries, compare_dates
from tradesort.sorting import merge_sort, quick_sort
from tradesort.searching import sort_by_date, binary_search, matching_entries

entries = read_entries("effects.csv")
by_value = merge_sort(entries, key=lambda entry: entry.value)

dated = sort_by_date(entries)
index = binary_search(dated, "01/01/2019")
if index is not None:
    for entry in matching_entries(dated, index, "01/01/2019"):
        print(entry.value, entry.cumulative)
```

- `tradesort.records`: the `DataEntry` dataclass, `parse_line`,
  `read_entries`, `parse_date` (returns `(year, month, day)`) and
  `compare_dates` (returns -1, 0 or 1).
- `tradesort.sorting`: `counting_sort(items, key, max_value)`,
  `merge_sort`, `heap_sort` and `quick_sort`, each returning a new list
  sorted ascending by an integer key (the item itself when `key` is `None`).
- `tradesort.searching`: `sort_by_date`, `binary_search` and
  `interpolation_search` (an index or `None`), `modified_bis` and
  `binary_interpolation_search` (an `(index or None, hits)` pair),
  `count_entries` and `matching_entries`.
- `tradesort.hashtable`: `hash_date` (sum of character codes modulo the
  table size) and `DateHashTable` with `insert`, `search`, `modify` and
  `delete`; the last three raise `KeyError` for an unknown date.
- `tradesort.searchapp.format_matches` and `tradesort.sortapp.write_report`
  produce the printed lines and the report file used by the commands.

## Limitations

`tradesort-hash` only checks that the CSV file can be read: it does not load
the records into its table, and its menu has no way to add records. The
table therefore starts and stays empty, so every search, modification and
deletion reports that the record was not found. To fill a table, use
`DateHashTable.insert` from Python.