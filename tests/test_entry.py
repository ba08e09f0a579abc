"""Entry-point tests: tagging plain values from the template and printing."""

from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from colprint import colprint, format_columns, tag_values
from colprint.lib.items import DebugItem, DisplayItem, as_item, split_lines


@dataclass
class Person:
    name: str
    age: int

    def __str__(self) -> str:
        return f"Name: {self.name}\nAge: {self.age}"


def test_tag_values_follows_token_modes() -> None:
    assert tag_values("{} {:?} {:#?:30}", [1, 2, 3]) == [
        DisplayItem(1),
        DebugItem(2),
        DebugItem(3),
    ]


def test_tag_values_drops_values_without_a_token() -> None:
    assert tag_values("{}", ["a", "b"]) == [DisplayItem("a")]
    assert tag_values("", ["a"]) == []


def test_tag_values_keeps_existing_tags() -> None:
    assert tag_values("{:?} {}", [DisplayItem("x"), DebugItem("y")]) == [
        DisplayItem("x"),
        DebugItem("y"),
    ]


def test_format_columns_mixes_display_and_debug() -> None:
    assert format_columns("{} | {:?}", "ab", "cd") == "ab | 'cd'\n"


def test_format_columns_with_multiline_display_value() -> None:
    output = format_columns("{} | {:?}", Person("Bob", 25), "x")
    assert output == "Name: Bob | 'x'\nAge: 25   |    \n"


def test_format_columns_pretty_debug_expands_containers() -> None:
    output = format_columns("{:#?} | {}", {"name": "Bob", "age": 25}, "ok", pretty_width=10)
    assert output == "{'name': 'Bob', | ok\n 'age': 25}     |   \n"


def test_format_columns_defaults_pretty_width_when_omitted() -> None:
    output = format_columns("{:#?}", {"name": "Bob", "age": 25})
    assert output == "{'name': 'Bob', 'age': 25}\n"


def test_explicit_zero_pretty_width_is_passed_through() -> None:
    # pprint rejects width 0; the caller's value must reach it unchanged.
    with pytest.raises(ValueError, match="width"):
        format_columns("{:#?}", {"name": "Bob"}, pretty_width=0)
    with pytest.raises(ValueError, match="width"):
        colprint("{:#?}", {"name": "Bob"}, file=io.StringIO(), pretty_width=0)


def test_colprint_writes_block_to_file() -> None:
    sink = io.StringIO()
    colprint("{:4}|{}", "ab", "cd", file=sink)
    assert sink.getvalue() == "ab  |cd\n"


def test_colprint_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    colprint("{} -> {:?}", "left", ["right"])
    assert capsys.readouterr().out == "left -> ['right']\n"


def test_as_item_wraps_bare_values_for_display() -> None:
    assert as_item(3) == DisplayItem(3)
    assert as_item(DebugItem(3)) == DebugItem(3)


@pytest.mark.parametrize(
    "text,expected",
    [
        pytest.param("", (), id="empty"),
        pytest.param("a", ("a",), id="single"),
        pytest.param("a\n", ("a",), id="final-break"),
        pytest.param("\n", ("",), id="lone-break"),
        pytest.param("a\n\nb", ("a", "", "b"), id="blank-middle"),
        pytest.param("a\r\nb\r\n", ("a", "b"), id="crlf"),
        pytest.param("a\x0bb", ("a\x0bb",), id="vertical-tab-kept"),
    ],
)
def test_split_lines(text: str, expected: tuple[str, ...]) -> None:
    assert split_lines(text) == expected
