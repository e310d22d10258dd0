"""Tests for the QueryParams carrier."""

from __future__ import annotations

from crnk_filtering import QueryParams


def test_empty():
    params = QueryParams()
    assert str(params) == ""
    assert len(params) == 0
    assert not params


def test_updates_return_new_instances():
    base = QueryParams()
    params = base.set("include", "client").set("sort", "-name")
    assert str(params) == "include=client&sort=-name"
    assert str(base) == ""


def test_set_keeps_key_position():
    params = QueryParams({"a": "1", "b": "2"}).set("a", "3")
    assert params.to_list() == [("a", "3"), ("b", "2")]


def test_append_and_get_all():
    params = QueryParams().append("id", 1).append("id", 2)
    assert params.get("id") == "1"
    assert params.get_all("id") == ["1", "2"]
    assert str(params) == "id=1&id=2"


def test_constructor_accepts_lists_and_pairs():
    params = QueryParams([("id", [1, 2]), ("id", 3), ("x", "y")])
    assert params.get_all("id") == ["1", "2", "3"]
    assert params.keys() == ["id", "x"]


def test_delete_and_has():
    params = QueryParams({"a": "1", "b": "2"}).delete("a").delete("missing")
    assert not params.has("a")
    assert "b" in params
    assert params.get("a") is None
    assert params.get_all("a") == []


def test_merge_overrides_keys():
    left = QueryParams({"a": "1", "b": "2"})
    right = QueryParams({"b": "3", "c": "4"})
    assert left.merge(right).to_list() == [("a", "1"), ("b", "3"), ("c", "4")]


def test_encoding():
    params = QueryParams({"filter[name][LIKE]": "Novi Sad%", "fields": "a,b"})
    assert str(params) == "filter%5Bname%5D%5BLIKE%5D=Novi%20Sad%25&fields=a,b"
    assert params.to_decoded_string() == "filter[name][LIKE]=Novi Sad%&fields=a,b"


def test_json_filter_encoding():
    params = QueryParams({"filter": '{"EQ": {"a": "b"}}'})
    assert str(params) == "filter=%7B%22EQ%22:%20%7B%22a%22:%20%22b%22%7D%7D"


def test_equality_and_hash():
    left = QueryParams({"a": "1"})
    right = QueryParams([("a", 1)])
    assert left == right
    assert hash(left) == hash(right)
    assert left != QueryParams({"a": "2"})
    assert repr(left) == "QueryParams([('a', '1')])"
