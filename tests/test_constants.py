"""Tests for texmacros.core.constants — verify documented values and types."""
from texmacros.core import constants


class TestDivisionConstants:
    def test_default_is_a_mode(self):
        assert constants.DEFAULT_DIVISION in constants.DIVISION_MODES

    def test_modes_distinct(self):
        assert len(set(constants.DIVISION_MODES)) == len(constants.DIVISION_MODES)


class TestFlagConstants:
    def test_namespaces_distinct(self):
        assert constants.BOOL_NAMESPACE != constants.TOGGLE_NAMESPACE


class TestCommandConstants:
    def test_cs_prefix(self):
        assert constants.CS_PREFIX == "\\"

    def test_default_handler(self):
        assert constants.DEFAULT_HANDLER == "do"

    def test_csv_separator(self):
        assert constants.CSV_SEPARATOR == ","


class TestScriptConstants:
    def test_comment_prefix(self):
        assert constants.COMMENT_PREFIX == "%"

    def test_reset_keyword_is_a_plain_word(self):
        assert constants.RESET_KEYWORD.isalpha()
