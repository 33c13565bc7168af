from math import factorial

import pytest

from bubble_ist.parents import parent_ids
from bubble_ist.table import Row, header, parent_rows, partition, write_csv


@pytest.mark.parametrize("total,parts", [(24, 5), (6, 6), (3, 4), (120, 7)])
def test_partition_covers_range(total, parts):
    chunks = [partition(total, parts, i) for i in range(parts)]
    position = 0
    for start, count in chunks:
        assert start == position
        position += count
    assert position == total
    counts = [c for _, c in chunks]
    assert max(counts) - min(counts) <= 1


def test_partition_errors():
    with pytest.raises(ValueError):
        partition(10, 0, 0)
    with pytest.raises(ValueError):
        partition(10, 3, 3)


def test_header():
    assert header(3) == "vertex_id,perm,T1,T2"


def test_row_to_csv():
    row = Row(1, (1, 3, 2), (4, 0))
    assert row.to_csv() == "1,1-3-2,4,0"


def test_parent_rows_all():
    rows = list(parent_rows(4))
    assert [r.vertex_id for r in rows] == list(range(factorial(4)))
    for row in rows:
        assert list(row.parents) == parent_ids(row.perm)
    assert rows[0].parents == (-1, -1, -1)


def test_parent_rows_chunks_concatenate():
    full = list(parent_rows(4))
    pieces = []
    for i in range(5):
        start, count = partition(factorial(4), 5, i)
        pieces.extend(parent_rows(4, start, count))
    assert pieces == full


def test_parent_rows_bad_range():
    with pytest.raises(ValueError):
        list(parent_rows(3, 4, 5))
    with pytest.raises(ValueError):
        list(parent_rows(1))


def test_write_csv_round_trip(tmp_path):
    path = tmp_path / "out.csv"
    rows = list(parent_rows(3))
    assert write_csv(path, 3, rows) == 6
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == header(3)
    assert lines[1:] == [row.to_csv() for row in rows]
    assert lines[1] == "0,1-2-3,-1,-1"