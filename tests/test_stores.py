"""Tests for texmacros.core.flags and texmacros.core.lists."""
import pytest

from texmacros.core.errors import DuplicateFlag, DuplicateList, UndefinedFlag, UndefinedList
from texmacros.core.flags import FlagStore
from texmacros.core.lists import ListParser, ListStore


class TestFlagStore:
    def test_created_false(self):
        fs = FlagStore()
        fs.create("bool", "draft")
        assert fs.get("bool", "draft") is False

    def test_set_and_get(self):
        fs = FlagStore()
        fs.create("bool", "draft")
        fs.set("bool", "draft", True)
        assert fs.get("bool", "draft") is True

    def test_set_before_create(self):
        with pytest.raises(UndefinedFlag):
            FlagStore().set("bool", "draft", True)

    def test_get_before_create(self):
        with pytest.raises(UndefinedFlag):
            FlagStore().get("toggle", "draft")

    def test_namespaces_are_separate(self):
        fs = FlagStore()
        fs.create("bool", "x")
        fs.set("bool", "x", True)
        fs.create("toggle", "x")
        assert fs.get("toggle", "x") is False
        assert fs.is_defined("bool", "x")

    def test_strict_create_twice(self):
        fs = FlagStore()
        fs.create("bool", "x", error_if_defined=True)
        with pytest.raises(DuplicateFlag):
            fs.create("bool", "x", error_if_defined=True)

    def test_provide_keeps_value(self):
        fs = FlagStore()
        fs.create("bool", "x")
        fs.set("bool", "x", True)
        fs.create("bool", "x")
        assert fs.get("bool", "x") is True

    def test_reset(self):
        fs = FlagStore()
        fs.create("bool", "x")
        fs.reset()
        assert fs.as_dict() == {}


class TestListStore:
    def test_create_empty(self):
        ls = ListStore()
        ls.create("L")
        assert ls.get("L") == []

    def test_get_missing(self):
        with pytest.raises(UndefinedList):
            ListStore().get("L")

    def test_add_missing_list(self):
        with pytest.raises(UndefinedList):
            ListStore().add("L", "x")

    def test_add_keeps_order_and_duplicates(self):
        ls = ListStore()
        ls.create("L")
        for item in ("b", "a", "b"):
            ls.add("L", item)
        assert ls.get("L") == ["b", "a", "b"]

    def test_add_empty_ignored(self):
        ls = ListStore()
        ls.create("L")
        ls.add("L", "a")
        ls.add("L", "")
        assert ls.get("L") == ["a"]

    def test_remove_first_only(self):
        ls = ListStore()
        ls.create("L")
        for item in ("a", "b", "a"):
            ls.add("L", item)
        assert ls.remove("L", "a") is True
        assert ls.get("L") == ["b", "a"]

    def test_remove_absent(self):
        ls = ListStore()
        ls.create("L")
        assert ls.remove("L", "zzz") is False

    def test_contains_exact(self):
        ls = ListStore()
        ls.create("L")
        ls.add("L", "apple")
        assert ls.contains("L", "apple")
        assert not ls.contains("L", "app")

    def test_get_returns_copy(self):
        ls = ListStore()
        ls.create("L")
        ls.get("L").append("x")
        assert ls.get("L") == []

    def test_strict_create_twice(self):
        ls = ListStore()
        ls.create("L", error_if_defined=True)
        with pytest.raises(DuplicateList):
            ls.create("L", error_if_defined=True)

    def test_parsers(self):
        ls = ListStore()
        ls.declare_parser("mylist", ";", star=True)
        assert ls.get_parser("mylist") == ListParser(";", True)
        assert ls.get_parser("other") is None

    def test_reset_clears_parsers(self):
        ls = ListStore()
        ls.create("L")
        ls.declare_parser("p", ",")
        ls.reset()
        assert ls.as_dict() == {}
        assert ls.parser_names() == []
