"""State for one document-processing session.

Bundles the counter registry, the flag store and the list store, plus the
expression settings the etoolbox commands need.  A long-lived host keeps one
MacroSession and calls ``begin_document()`` (or ``reset()``) at every
document boundary instead of relying on process restart.

All access is single-threaded: the host serialises macro invocations.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from texmacros.core.constants import DEFAULT_DIVISION, DIVISION_MODES
from texmacros.core.counters import CounterRegistry
from texmacros.core.expression import Number, evaluate
from texmacros.core.flags import FlagStore
from texmacros.core.lists import ListStore

if TYPE_CHECKING:
    from texmacros.core.settings_manager import SettingsManager

CounterSpec = tuple[str, Optional[str]]   # (name, reset_by)


class MacroSession:
    """The stores one document manipulates."""

    def __init__(
        self,
        division:         str = DEFAULT_DIVISION,
        initial_counters: Iterable[CounterSpec] = (),
    ) -> None:
        if division not in DIVISION_MODES:
            raise ValueError(f"division must be one of {DIVISION_MODES}, got {division!r}")
        self.division  = division
        self.counters  = CounterRegistry()
        self.flags     = FlagStore()
        self.lists     = ListStore()
        self._initial_counters: list[CounterSpec] = list(initial_counters)
        self._seed()

    @classmethod
    def from_settings(cls, settings: "SettingsManager") -> "MacroSession":
        return cls(division=settings.division, initial_counters=settings.predefined_counters)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Empty every store."""
        self.counters.reset()
        self.flags.reset()
        self.lists.reset()

    def begin_document(self) -> None:
        """Reset, then recreate the predefined counters at 0."""
        self.reset()
        self._seed()

    def _seed(self) -> None:
        for name, reset_by in self._initial_counters:
            self.counters.create(name, reset_by)

    # ------------------------------------------------------------------
    def evaluate(self, expr: str) -> Number:
        """Evaluate an integer expression with this session's division mode."""
        return evaluate(expr, self.division)

    def as_dict(self) -> dict:
        return {
            "counters": self.counters.as_dict(),
            "flags":    self.flags.as_dict(),
            "lists":    self.lists.as_dict(),
        }

    def __repr__(self) -> str:
        return f"MacroSession({self.as_dict()!r})"
