import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from tabjson import (
    BorderDetection,
    EmptyInputError,
    NoDataError,
    NoHeaderError,
    TableFormat,
    TableParseError,
    TabularTextParser,
    convert,
    parse_table,
)


# ----------------------------------------------------------------------
# Bordered tables
# ----------------------------------------------------------------------
def test_markdown_table_end_to_end(parser, markdown_table):
    table = parser.parse(markdown_table)

    assert table.table_format is TableFormat.BORDERED
    assert table.headers == ["name", "age"]
    assert table.rows == [{"name": "Alice", "age": 30}, {"name": "Bob", "age": ""}]


def test_two_column_row_is_coerced_to_integers(parser):
    table = parser.parse("| a | b |\n| 1 | 2 |\n")

    assert table.rows == [{"a": 1, "b": 2}]
    assert all(type(v) is int for v in table.rows[0].values())


def test_mysql_table_with_rules_nulls_and_footer(parser, mysql_table):
    table = parser.parse(mysql_table)

    assert table.headers == ["id", "name", "score"]
    assert table.rows == [
        {"id": 1, "name": "Alice", "score": 9.5},
        {"id": 2, "name": None, "score": -3},
    ]
    # "2 rows in set" has no column separator
    assert table.dropped_rows == 1


def test_table_without_outer_pipes(parser):
    table = parser.parse("name | age\n-----+----\nAlice | 30\n")
    assert table.rows == [{"name": "Alice", "age": 30}]


def test_missing_trailing_cells_become_empty_strings(parser):
    table = parser.parse("| a | b | c |\n| 1 |\n")
    assert table.rows == [{"a": 1, "b": "", "c": ""}]


def test_empty_middle_cell_is_kept(parser):
    table = parser.parse("| a | b | c |\n| 1 |  | 3 |\n")
    assert table.rows == [{"a": 1, "b": "", "c": 3}]


def test_extra_cells_are_ignored(parser):
    table = parser.parse("| a |\n| 1 | 2 | 3 |\n")
    assert table.rows == [{"a": 1}]


def test_repeated_header_is_parsed_as_data(parser):
    text = "| id | v |\n|----|---|\n| 1 | x |\n| id | v |\n| 2 | y |\n"
    table = parser.parse(text)

    assert table.rows == [
        {"id": 1, "v": "x"},
        {"id": "id", "v": "v"},
        {"id": 2, "v": "y"},
    ]


def test_duplicate_header_overwrites_earlier_cell(parser):
    table = parser.parse("| k | k |\n| 1 | 2 |\n")

    assert table.headers == ["k", "k"]
    assert table.rows == [{"k": 2}]


def test_windows_line_endings(parser):
    table = parser.parse("| a | b |\r\n|---|---|\r\n| x | 1 |\r\n")
    assert table.rows == [{"a": "x", "b": 1}]


def test_separator_only_input_fails(parser):
    with pytest.raises((NoHeaderError, NoDataError)):
        parser.parse("+--+--+\n")
    with pytest.raises((NoHeaderError, NoDataError)):
        parser.parse("\n+----+----+\n\n|----|----|\n")


def test_rule_lines_without_pipes_have_no_header(parser):
    with pytest.raises(NoHeaderError):
        parser.parse("+----+\nnot a table row\n+----+\n")


def test_header_without_rows_has_no_data(parser):
    with pytest.raises(NoDataError) as exc_info:
        parser.parse("| a | b |\n|---|---|\n")
    assert str(exc_info.value) == "No valid data found"


# ----------------------------------------------------------------------
# Delimited tables
# ----------------------------------------------------------------------
def test_tab_delimited_end_to_end(parser, tab_table):
    table = parser.parse(tab_table)

    assert table.table_format is TableFormat.DELIMITED
    assert table.rows == [{"id": 1, "val": 10}, {"id": 2, "val": 20}]


def test_multi_space_delimited_keeps_single_spaces_in_cells(parser):
    text = "name          city\nAlice Smith   New York\nBob           Paris\n"
    table = parser.parse(text)

    assert table.rows == [
        {"name": "Alice Smith", "city": "New York"},
        {"name": "Bob", "city": "Paris"},
    ]


def test_delimited_rows_with_wrong_arity_are_dropped(parser):
    table = parser.parse("a\tb\tc\n1\t2\t3\n4\t5\n6\t7\t8\t9\n")

    assert table.rows == [{"a": 1, "b": 2, "c": 3}]
    assert table.dropped_rows == 2


def test_delimited_header_only_has_no_data(parser):
    with pytest.raises(NoDataError):
        parser.parse("a\tb\n")


def test_delimited_null_and_floats(parser):
    table = parser.parse("x\ty\nNULL\t-0.25\n")
    assert table.rows == [{"x": None, "y": -0.25}]


# ----------------------------------------------------------------------
# Format detection
# ----------------------------------------------------------------------
@pytest.mark.parametrize(
    "lines,expected",
    [
        (["| a | b |"], TableFormat.BORDERED),
        (["+----+----+", "  a    b  "], TableFormat.BORDERED),
        (["a\tb", "1\t2"], TableFormat.DELIMITED),
        (["id  delta", "1  -5"], TableFormat.DELIMITED),
        (["a  b", "---  ---"], TableFormat.DELIMITED),
    ],
)
def test_structural_detection(parser, lines, expected):
    assert parser.detect_format(lines) is expected


def test_legacy_detection_treats_any_dash_as_border():
    legacy = TabularTextParser(border_detection="legacy")

    assert legacy.border_detection is BorderDetection.LEGACY
    assert legacy.detect_format(["id  delta", "1  -5"]) is TableFormat.BORDERED
    assert legacy.detect_format(["a + b"]) is TableFormat.BORDERED
    assert legacy.detect_format(["a\tb"]) is TableFormat.DELIMITED


def test_negative_numbers_in_delimited_input_depend_on_detection_mode():
    text = "id  delta\n1  -5\n"

    assert parse_table(text).rows == [{"id": 1, "delta": -5}]
    with pytest.raises(NoHeaderError):
        parse_table(text, border_detection=BorderDetection.LEGACY)


def test_unknown_detection_mode_is_rejected():
    with pytest.raises(ValueError):
        TabularTextParser(border_detection="fuzzy")


# ----------------------------------------------------------------------
# Orchestration
# ----------------------------------------------------------------------
@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n", None])
def test_empty_input(parser, text):
    with pytest.raises(EmptyInputError) as exc_info:
        parser.parse(text)
    assert str(exc_info.value) == "No input provided"


def test_errors_share_a_base_class(parser):
    for text in ["", "+--+\n", "| a |\n"]:
        with pytest.raises(TableParseError):
            parser.parse(text)


def test_convert_uses_two_space_indent(tab_table):
    expected = json.dumps([{"id": 1, "val": 10}, {"id": 2, "val": 20}], indent=2)
    assert convert(tab_table) == expected


def test_convert_compact_output(tab_table):
    assert convert(tab_table, indent=None) == '[{"id": 1, "val": 10}, {"id": 2, "val": 20}]'


def test_convert_keeps_non_ascii_verbatim():
    output = convert("| 名称 | 数量 |\n| 苹果 | 3 |\n")

    assert "名称" in output
    assert json.loads(output) == [{"名称": "苹果", "数量": 3}]


def test_own_json_output_is_not_table_syntax(parser):
    original = parser.parse("| a | b |\n| 1 | 2 |\n")
    reparsed = parser.parse(original.to_json())

    assert reparsed.rows != original.rows


def test_parse_is_deterministic_and_thread_safe(parser, mysql_table):
    expected = parser.parse(mysql_table)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(parser.parse, [mysql_table] * 32))

    assert all(result == expected for result in results)


def test_convert_output_is_strict_json_for_huge_decimals():
    huge = "9" * 400 + ".5"

    def reject(token):
        raise ValueError(token)

    output = convert(f"| big |\n| {huge} |\n")
    assert json.loads(output, parse_constant=reject) == [{"big": huge}]
