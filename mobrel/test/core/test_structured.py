"""Tests for mobrel.core.structured module."""

from mobrel.core.structured import as_str_dict, get_int, get_str, get_table, is_str_dict


def test_is_str_dict() -> None:
    assert is_str_dict({"a": 1}) is True
    assert is_str_dict({1: "a"}) is False
    assert is_str_dict(["a"]) is False


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict("nope") is None


def test_get_str_strips_and_rejects_blank() -> None:
    table: dict[str, object] = {"a": "  x ", "b": "   ", "c": 3}
    assert get_str(table, "a") == "x"
    assert get_str(table, "b") is None
    assert get_str(table, "c") is None
    assert get_str(table, "missing") is None


def test_get_int_rejects_bool() -> None:
    table: dict[str, object] = {"n": 20, "flag": True, "s": "20"}
    assert get_int(table, "n") == 20
    assert get_int(table, "flag") is None
    assert get_int(table, "s") is None


def test_get_table() -> None:
    table: dict[str, object] = {"ios": {"api_key_id": "K"}, "x": 1}
    assert get_table(table, "ios") == {"api_key_id": "K"}
    assert get_table(table, "x") is None
