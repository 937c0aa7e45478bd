import json

import pytest

from tabjson import ParsedTable, TableFormat


def _table(**kwargs):
    defaults = dict(
        table_format=TableFormat.BORDERED,
        headers=["id", "name"],
        rows=[{"id": 1, "name": "Alice"}, {"id": 2, "name": None}],
    )
    defaults.update(kwargs)
    return ParsedTable(**defaults)


def test_len_and_column_count():
    table = _table()
    assert len(table) == 2
    assert table.column_count == 2
    assert table.dropped_rows == 0


def test_cell_types_survive_validation():
    table = _table(rows=[{"id": 1, "name": "1", "score": 1.5, "note": None}])
    row = table.rows[0]

    assert type(row["id"]) is int
    assert type(row["name"]) is str
    assert type(row["score"]) is float
    assert row["note"] is None


def test_to_json_round_trips_through_json_module():
    table = _table()
    assert json.loads(table.to_json()) == table.rows
    assert table.to_json(indent=None) == '[{"id": 1, "name": "Alice"}, {"id": 2, "name": null}]'


def test_table_format_serializes_as_string():
    assert _table().model_dump(mode="json")["table_format"] == "bordered"


def test_to_dataframe_follows_header_order():
    table = _table(headers=["name", "id"], rows=[{"name": "Alice", "id": 1}])
    df = table.to_dataframe()

    assert list(df.columns) == ["name", "id"]
    assert df.iloc[0]["name"] == "Alice"
    assert df.iloc[0]["id"] == 1


def test_to_dataframe_collapses_duplicate_headers():
    table = _table(headers=["k", "k"], rows=[{"k": 2}])
    df = table.to_dataframe()

    assert list(df.columns) == ["k"]
    assert len(df) == 1


def test_to_json_refuses_non_finite_floats():
    table = _table(rows=[{"id": float("inf"), "name": "x"}])

    with pytest.raises(ValueError):
        table.to_json()
