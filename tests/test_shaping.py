"""Tests for argument shaping helpers."""
from datetime import datetime, timedelta, timezone

import pytest

from clockify_mcp.errors import InvalidArgumentsError
from clockify_mcp.shaping import compact, flag, id_filter, iso_instant, normalize_instant, split_args, with_query


class TestQueryStrings:
    def test_insertion_order_and_stringified_values(self) -> None:
        assert with_query("/p", {"archived": True, "pageSize": 10}) == "/p?archived=true&pageSize=10"

    def test_skips_none(self) -> None:
        assert with_query("/p", {"name": None, "page": 2}) == "/p?page=2"
        assert with_query("/p", {}) == "/p"

    def test_integral_float(self) -> None:
        assert with_query("/p", {"page": 2.0}) == "/p?page=2"

    def test_encoding(self) -> None:
        assert with_query("/p", {"name": "a b&c", "tags": "t1,t2"}) == "/p?name=a+b%26c&tags=t1%2Ct2"


class TestInstants:
    def test_date_only_becomes_utc_midnight(self) -> None:
        assert normalize_instant("start", "2024-01-15") == "2024-01-15T00:00:00.000Z"

    def test_value_with_separator_passes_through(self) -> None:
        assert normalize_instant("start", "2024-01-15T09:00:00Z") == "2024-01-15T09:00:00Z"

    def test_free_form_date(self) -> None:
        assert normalize_instant("end", "Jan 15 2024 17:30") == "2024-01-15T17:30:00.000Z"

    def test_offset_converted_to_utc(self) -> None:
        aware = datetime(2024, 1, 15, 9, 0, 0, 250000, tzinfo=timezone(timedelta(hours=2)))
        assert iso_instant(aware) == "2024-01-15T07:00:00.250Z"

    def test_unparseable(self) -> None:
        with pytest.raises(InvalidArgumentsError, match="start is not a valid date"):
            normalize_instant("start", "not a date")


def test_split_args_leaves_original_untouched() -> None:
    args = {"workspaceId": "w1", "projectId": "p1", "name": "X"}
    (ws, project), rest = split_args(args, "workspaceId", "projectId")
    assert (ws, project) == ("w1", "p1")
    assert rest == {"name": "X"}
    assert "workspaceId" in args


def test_compact_and_filters() -> None:
    assert compact({"a": None, "b": False, "c": 0}) == {"b": False, "c": 0}
    assert id_filter(["u1"]) == {"ids": ["u1"]}
    assert id_filter(None) is None


def test_flag() -> None:
    assert flag(True) == "true"
    assert flag(False) == "false"
    assert flag(None) == "unknown"
    assert flag("#fff") == "#fff"


def test_weekday_names_are_not_mistaken_for_instants() -> None:
    assert normalize_instant("start", "Tue Jan 16 2024") == "2024-01-16T00:00:00.000Z"
