"""Counter registry for one document session.

Counters form a forest: each counter has at most one super counter (the one
that resets it) and an ordered list of sub counters.  Links are stored as
names into the registry, never as object references, so reparenting is a
matter of editing two lists and one field.

Only ``step`` cascades: stepping a counter resets its whole subtree to 0.
``set_value`` and ``add_to`` touch the one counter only, as in LaTeX where
only ``\\stepcounter`` resets dependants.

Rendering
---------
``render_mode`` is either ``PLAIN`` (value as decimal) or
``PrefixedBy(name)`` (``render(name) + "." + value``).  The prefix is set by
``within(..., update_render_mode=True)`` and cleared by ``without``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Union

from texmacros.core.errors import CounterCycle, DuplicateCounter, UndefinedCounter


@dataclass(frozen=True)
class Plain:
    """Render the bare value."""


@dataclass(frozen=True)
class PrefixedBy:
    """Render as ``<rendered super_name>.<value>``."""
    super_name: str


RenderMode = Union[Plain, PrefixedBy]
PLAIN = Plain()


@dataclass
class Counter:
    name:        str
    value:       int              = 0
    super_name:  str | None       = None
    sub_names:   list[str]        = field(default_factory=list)
    render_mode: RenderMode       = PLAIN


def _super_of(counter: Counter) -> str | None:
    return counter.super_name


def _prefix_of(counter: Counter) -> str | None:
    mode = counter.render_mode
    return mode.super_name if isinstance(mode, PrefixedBy) else None


class CounterRegistry:
    """Maps counter name → Counter."""

    def __init__(self) -> None:
        self._counters: dict[str, Counter] = {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> Counter:
        counter = self._counters.get(name)
        if counter is None:
            raise UndefinedCounter(name)
        return counter

    def try_get(self, name: str) -> Counter | None:
        return self._counters.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._counters

    def __len__(self) -> int:
        return len(self._counters)

    def names(self) -> list[str]:
        return list(self._counters)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create(self, name: str, reset_by: str | None = None, initial_value: int = 0) -> Counter:
        """Register a new counter, optionally reset by ``reset_by``."""
        if name in self._counters:
            raise DuplicateCounter(name)
        parent = self.get(reset_by) if reset_by else None

        counter = Counter(name=name, value=initial_value)
        if parent is not None:
            parent.sub_names.append(name)
            counter.super_name = parent.name
        self._counters[name] = counter
        return counter

    def reset(self) -> None:
        """Forget every counter (document boundary)."""
        self._counters.clear()

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def value(self, name: str) -> int:
        return self.get(name).value

    def set_value(self, name: str, value: int) -> None:
        self.get(name).value = value

    def add_to(self, name: str, delta: int) -> None:
        self.get(name).value += delta

    def step(self, name: str) -> None:
        """Increment ``name`` and reset every counter below it to 0."""
        counter = self.get(name)
        counter.value += 1
        for sub_name in counter.sub_names:
            # -1 then step, so the sub counter's own subtree is reset too
            self._counters[sub_name].value = -1
            self.step(sub_name)

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    def within(self, name: str, super_name: str, update_render_mode: bool = True) -> None:
        """Make ``super_name`` the counter that resets ``name``.

        Any previous super counter lets go of ``name`` first.  Raises
        CounterCycle, leaving everything untouched, when ``name`` is
        ``super_name`` itself or one of its ancestors.  With
        ``update_render_mode`` the render prefixes of ``super_name`` must not
        lead back to ``name`` either; the starred form keeps the render mode
        and only checks super links.
        """
        counter = self.get(name)
        new_super = self.get(super_name)
        if name in self._chain(super_name, _super_of) or (
            update_render_mode and name in self._chain(super_name, _prefix_of)
        ):
            raise CounterCycle(name, super_name)

        self._detach(counter)
        new_super.sub_names.append(name)
        counter.super_name = super_name
        if update_render_mode:
            counter.render_mode = PrefixedBy(super_name)

    def without(self, name: str, super_name: str) -> bool:
        """Detach ``name`` from ``super_name``.

        Does nothing and returns False if ``super_name`` is not the current
        super counter.
        """
        counter = self.get(name)
        self.get(super_name)
        if counter.super_name != super_name:
            return False
        self._detach(counter)
        counter.render_mode = PLAIN
        return True

    def _detach(self, counter: Counter) -> None:
        if counter.super_name is None:
            return
        old = self._counters[counter.super_name]
        if counter.name in old.sub_names:
            old.sub_names.remove(counter.name)
        counter.super_name = None

    def _chain(self, name: str, link: Callable[[Counter], str | None]) -> Iterator[str]:
        """Yield ``name`` and every counter reached by following ``link``."""
        seen: set[str] = set()
        current: str | None = name
        while current is not None and current not in seen:
            seen.add(current)
            yield current
            counter = self._counters.get(current)
            current = link(counter) if counter is not None else None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, name: str) -> str:
        """Text of ``\\the<name>``."""
        counter = self.get(name)
        mode = counter.render_mode
        if isinstance(mode, PrefixedBy):
            return f"{self.render(mode.super_name)}.{counter.value}"
        return str(counter.value)

    # ------------------------------------------------------------------
    def as_dict(self) -> dict[str, int]:
        return {name: c.value for name, c in self._counters.items()}

    def __repr__(self) -> str:
        return f"CounterRegistry({self.as_dict()!r})"
