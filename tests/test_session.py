"""Tests for texmacros.core.session — MacroSession lifecycle."""
import pytest

from texmacros.core.constants import DIVISION_ROUND
from texmacros.core.session import MacroSession
from texmacros.core.settings_manager import SettingsManager


class TestLifecycle:
    def test_seeded_on_init(self):
        s = MacroSession(initial_counters=[("section", None), ("subsection", "section")])
        assert s.counters.get("subsection").super_name == "section"

    def test_reset_empties_everything(self):
        s = MacroSession(initial_counters=[("page", None)])
        s.flags.create("bool", "draft")
        s.lists.create("fruits")
        s.lists.declare_parser("semilist", ";")
        s.reset()
        assert len(s.counters) == 0
        assert not s.flags.is_defined("bool", "draft")
        assert not s.lists.is_defined("fruits")
        assert s.lists.get_parser("semilist") is None

    def test_begin_document_reseeds_at_zero(self):
        s = MacroSession(initial_counters=[("page", None)])
        s.counters.set_value("page", 7)
        s.counters.create("extra")
        s.begin_document()
        assert s.counters.value("page") == 0
        assert "extra" not in s.counters


class TestEvaluate:
    def test_true_division(self):
        assert MacroSession().evaluate("7/2") == 3.5

    def test_round_division(self):
        assert MacroSession(division=DIVISION_ROUND).evaluate("7/2") == 4

    def test_invalid_division_mode(self):
        with pytest.raises(ValueError):
            MacroSession(division="floor")


class TestFromSettings:
    def test_uses_settings(self, tmp_path):
        ini = tmp_path / "settings.ini"
        ini.write_text(
            "[NUMEXPR]\ndivision = round\n\n[COUNTERS]\nsection =\nsubsection = section\n",
            encoding="utf-8",
        )
        s = MacroSession.from_settings(SettingsManager(ini))
        assert s.division == DIVISION_ROUND
        assert s.counters.names() == ["section", "subsection"]

    def test_as_dict(self):
        s = MacroSession(initial_counters=[("page", None)])
        d = s.as_dict()
        assert set(d) == {"counters", "flags", "lists"}
