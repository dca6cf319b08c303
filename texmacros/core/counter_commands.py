"""Handlers for the LaTeX counter commands.

Every handler is called as ``handler(dispatcher, args, name, *params)``
where ``args`` is the ArgumentSource positioned right after the command,
``name`` is the command as invoked (for error messages) and ``params`` are
the fixed extras from the COMMANDS table below.

Handlers return None (pure side effect), an int (``\\value``) or text for
the host to typeset.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from texmacros.core.arguments import (
    ArgumentSource, get_cs_name_argument, get_cs_name_brackets, get_number,
)
from texmacros.core.counters import Counter
from texmacros.core.errors import InvalidArgumentOrder
from texmacros.core.formatting import format_value, to_roman

if TYPE_CHECKING:
    from texmacros.core.dispatcher import Dispatcher


def get_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> Counter:
    return d.session.counters.get(args.get_argument(name))


# ---------------------------------------------------------------------------
# Definition and values
# ---------------------------------------------------------------------------

def new_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    """\\newcounter{cs}[reset_by]"""
    cs = get_cs_name_argument(args, name)
    # \newcounter[within]{cs} is a common mistake; LaTeX wants the name first
    if cs == "[":
        raise InvalidArgumentOrder()
    reset_by = get_cs_name_brackets(args, name)
    d.session.counters.create(cs, reset_by)
    d.log("DEBUG", f"New counter {cs!r}" + (f" reset by {reset_by!r}" if reset_by else ""))


def set_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    counter = get_counter(d, args, name)
    value = get_number(args, name)
    d.session.counters.set_value(counter.name, value)


def step_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    counter = get_counter(d, args, name)
    d.session.counters.step(counter.name)


def add_to_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    counter = get_counter(d, args, name)
    delta = get_number(args, name)
    d.session.counters.add_to(counter.name, delta)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------

def counter_within(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    """\\counterwithin{counter}{super} and \\counterwithin*{counter}{super}

    The counter is reset whenever super is stepped.  The unstarred form
    also makes ``\\thecounter`` print ``\\thesuper.`` in front of the value.
    The starred form leaves the render mode alone, so a prefix set by an
    earlier unstarred call survives; use \\counterwithout first to drop it.
    """
    update_render_mode = not args.get_star()
    counter = get_counter(d, args, name)
    super_counter = get_counter(d, args, name)
    d.session.counters.within(counter.name, super_counter.name, update_render_mode)
    d.log("DEBUG", f"Counter {counter.name!r} now within {super_counter.name!r}")


def counter_without(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    """\\counterwithout{counter}{super}: no-op unless super is current."""
    counter = get_counter(d, args, name)
    super_counter = get_counter(d, args, name)
    if not d.session.counters.without(counter.name, super_counter.name):
        d.log("WARNING", f"{name}: {counter.name!r} is not within {super_counter.name!r}")


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def format_counter(d: "Dispatcher", args: ArgumentSource, name: str, style: str) -> str:
    """\\arabic, \\roman, \\Roman, \\alph, \\Alph, \\fnsymbol"""
    counter = get_counter(d, args, name)
    return format_value(style, counter.value)


def value(d: "Dispatcher", args: ArgumentSource, name: str) -> int:
    return get_counter(d, args, name).value


def number(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    return str(get_number(args, name))


def roman_numeral(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    return to_roman(get_number(args, name)).lower()


def the_counter(d: "Dispatcher", args: ArgumentSource, name: str, counter_name: str) -> str:
    """\\the<counter>, registered implicitly for every counter."""
    return d.session.counters.render(counter_name)


COMMANDS = {
    "newcounter":     (new_counter, ()),
    "setcounter":     (set_counter, ()),
    "stepcounter":    (step_counter, ()),
    "addtocounter":   (add_to_counter, ()),
    "arabic":         (format_counter, ("arabic",)),
    "roman":          (format_counter, ("roman",)),
    "Roman":          (format_counter, ("Roman",)),
    "alph":           (format_counter, ("alph",)),
    "Alph":           (format_counter, ("Alph",)),
    "fnsymbol":       (format_counter, ("fnsymbol",)),
    "counterwithin":  (counter_within, ()),
    "counterwithout": (counter_without, ()),
    "value":          (value, ()),
    "number":         (number, ()),
    "romannumeral":   (roman_numeral, ()),
}
