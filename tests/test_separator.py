"""Tests for texmacros.core.separator — brace-aware splitting."""
import pytest

from texmacros.core.errors import ExtraCloseBrace, MissingCloseBrace
from texmacros.core.separator import separate


class TestSeparate:
    def test_braced_item_is_atomic(self):
        assert separate("a, {b,c}, d", ",") == ["a", "b,c", "d"]

    def test_empty_input(self):
        assert separate("", ",") == []

    def test_no_separator(self):
        assert separate("abc", ",") == ["abc"]

    def test_trailing_separator_gives_empty_item(self):
        assert separate("a,", ",") == ["a", ""]

    def test_item_count(self):
        assert len(separate(",,", ",")) == 3

    def test_space_before_separator_kept(self):
        assert separate("a ,b", ",") == ["a ", "b"]

    def test_multichar_separator(self):
        assert separate("x;;y;;z", ";;") == ["x", "y", "z"]

    def test_nested_braces_keep_inner(self):
        assert separate("{a{b}c},d", ",") == ["a{b}c", "d"]

    def test_escaped_braces_are_text(self):
        assert separate(r"\{a,b\}", ",") == [r"\{a", r"b\}"]

    def test_escaped_backslash_before_brace(self):
        assert separate(r"\\{a,b}", ",") == ["\\\\a,b"]

    def test_extra_close_brace(self):
        with pytest.raises(ExtraCloseBrace):
            separate("a}", ",")

    def test_missing_close_brace(self):
        with pytest.raises(MissingCloseBrace):
            separate("{a,b", ",")

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            separate("a", "")
