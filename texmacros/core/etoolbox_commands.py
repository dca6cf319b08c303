"""Handlers for the etoolbox commands.

Same calling convention as counter_commands: ``handler(dispatcher, args,
name, *params)``.

Conditionals read their ``{<true>}{<false>}`` arguments and return the
selected one as text; loops return a ``\\handler{item}`` sequence.  The host
re-injects that text into its input, this module never parses it.
"""
from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Callable

from texmacros.core.arguments import ArgumentSource, get_cs_name_argument
from texmacros.core.constants import (
    BOOL_NAMESPACE, CS_PREFIX, CSV_SEPARATOR, DEFAULT_HANDLER, TOGGLE_NAMESPACE,
)
from texmacros.core.counter_commands import get_counter
from texmacros.core.errors import InvalidFlag, InvalidNumber, InvalidRelation
from texmacros.core.separator import separate

if TYPE_CHECKING:
    from texmacros.core.dispatcher import Dispatcher

# \ifnumcomp in etoolbox itself only knows <, > and =
_RELATIONS: dict[str, Callable[[float, float], bool]] = {
    "=":  operator.eq,
    "!=": operator.ne,
    "<":  operator.lt,
    ">":  operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def branch(args: ArgumentSource, name: str, condition: bool, negate: bool = False) -> str:
    """Read ``{<true>}{<false>}`` and return the one selected."""
    if_true = args.get_argument(name)
    if_false = args.get_argument(name)
    return if_true if condition != negate else if_false


def _expand_items(items: list[str], handler: str) -> str:
    return "".join(f"{CS_PREFIX}{handler}{{{item}}}" for item in items)


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------

def def_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    """\\defcounter{counter}{integer expression}"""
    counter = get_counter(d, args, name)
    expr = args.get_argument(name)
    result = d.session.evaluate(expr)
    if result != int(result):
        raise InvalidNumber(expr)
    d.session.counters.set_value(counter.name, int(result))


def if_def_counter(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    """\\ifdefcounter, \\ifcscounter, \\ifltxcounter

    Only \\newcounter counters exist here, so all three are the same test.
    """
    cs = get_cs_name_argument(args, name)
    return branch(args, name, cs in d.session.counters)


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

def new_flag(d: "Dispatcher", args: ArgumentSource, name: str, namespace: str, error_if_defined: bool) -> None:
    """\\newbool / \\providebool / \\newtoggle / \\providetoggle"""
    cs = get_cs_name_argument(args, name)
    d.session.flags.create(namespace, cs, error_if_defined)


def set_flag(d: "Dispatcher", args: ArgumentSource, name: str, namespace: str, value: bool | None = None) -> None:
    """\\setbool{flag}{true|false}, \\booltrue{flag}, \\boolfalse{flag} and toggles."""
    cs = get_cs_name_argument(args, name)
    if value is None:
        arg = args.get_argument(name)
        if arg not in ("true", "false"):
            raise InvalidFlag(arg)
        value = arg == "true"
    d.session.flags.set(namespace, cs, value)


def if_flag(d: "Dispatcher", args: ArgumentSource, name: str, namespace: str, negate: bool) -> str:
    """\\ifbool, \\notbool, \\iftoggle, \\nottoggle"""
    cs = get_cs_name_argument(args, name)
    return branch(args, name, d.session.flags.get(namespace, cs), negate)


# ---------------------------------------------------------------------------
# Definitions and strings
# ---------------------------------------------------------------------------

def if_def(d: "Dispatcher", args: ArgumentSource, name: str, negate: bool) -> str:
    """\\ifdef, \\ifcsdef, \\ifundef, \\ifcsundef: known to the dispatcher?"""
    cs = get_cs_name_argument(args, name)
    return branch(args, name, d.has(cs), negate)


def if_str_equal(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    first = args.get_argument(name)
    second = args.get_argument(name)
    return branch(args, name, first == second)


def if_blank(d: "Dispatcher", args: ArgumentSource, name: str, trim: bool, negate: bool) -> str:
    """\\ifstrempty (no trim), \\ifblank and \\notblank (trimmed)."""
    text = args.get_argument(name)
    if trim:
        text = text.strip()
    return branch(args, name, text == "", negate)


# ---------------------------------------------------------------------------
# Arithmetic tests
# ---------------------------------------------------------------------------

def if_num_comp(d: "Dispatcher", args: ArgumentSource, name: str, relation: str | None = None) -> str:
    """\\ifnumcomp{num1}{relation}{num2}{true}{false} and its fixed-relation aliases."""
    first = d.session.evaluate(args.get_argument(name))
    if relation is None:
        relation = args.get_argument(name).strip()
    second = d.session.evaluate(args.get_argument(name))
    compare = _RELATIONS.get(relation)
    if compare is None:
        raise InvalidRelation(relation)
    return branch(args, name, compare(first, second))


def if_num_parity(d: "Dispatcher", args: ArgumentSource, name: str, parity: int) -> str:
    """\\ifnumeven (parity 0) and \\ifnumodd (parity 1)."""
    num = d.session.evaluate(args.get_argument(name))
    return branch(args, name, num % 2 == parity)


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

def list_add(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    """\\listadd{\\list}{item}; an undefined list starts out empty."""
    list_name = get_cs_name_argument(args, name)
    item = args.get_argument(name)
    d.session.lists.create(list_name)
    d.session.lists.add(list_name, item)


def list_remove(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    list_name = get_cs_name_argument(args, name)
    item = args.get_argument(name)
    if not d.session.lists.remove(list_name, item):
        d.log("WARNING", f"{name}: {item!r} not in list {list_name!r}")


def if_in_list(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    """\\ifinlist{item}{\\list}{true}{false}"""
    item = args.get_argument(name)
    list_name = get_cs_name_argument(args, name)
    return branch(args, name, d.session.lists.contains(list_name, item))


def do_list_loop(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    """\\dolistloop{\\list} → ``\\do{item1}\\do{item2}…``"""
    list_name = get_cs_name_argument(args, name)
    return _expand_items(d.session.lists.get(list_name), DEFAULT_HANDLER)


def for_list_loop(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    """\\forlistloop{\\handler}{\\list}"""
    handler = get_cs_name_argument(args, name, require_backslash=True)
    list_name = get_cs_name_argument(args, name)
    return _expand_items(d.session.lists.get(list_name), handler)


def do_csv_list(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    """\\docsvlist{a,b,c}"""
    return _expand_items(separate(args.get_argument(name), CSV_SEPARATOR), DEFAULT_HANDLER)


def for_csv_list(d: "Dispatcher", args: ArgumentSource, name: str) -> str:
    """\\forcsvlist{\\handler}{a,b,c}"""
    handler = get_cs_name_argument(args, name, require_backslash=True)
    return _expand_items(separate(args.get_argument(name), CSV_SEPARATOR), handler)


def declare_list_parser(d: "Dispatcher", args: ArgumentSource, name: str) -> None:
    """\\DeclareListParser{\\cs}{separator} and the starred variant.

    The plain parser is used as ``\\cs{list}`` and expands to \\do items;
    the starred one is used as ``\\cs{\\handler}{list}``.
    """
    star = args.get_star()
    cs = get_cs_name_argument(args, name, require_backslash=True)
    separator = args.get_argument(name)
    d.session.lists.declare_parser(cs, separator, star)
    d.log("DEBUG", f"Declared list parser {cs!r} on {separator!r}")


def run_list_parser(d: "Dispatcher", args: ArgumentSource, name: str, cs: str) -> str:
    """Expansion of a command declared with \\DeclareListParser."""
    parser = d.session.lists.get_parser(cs)
    handler = DEFAULT_HANDLER
    if parser.star:
        handler = get_cs_name_argument(args, name, require_backslash=True)
    return _expand_items(separate(args.get_argument(name), parser.separator), handler)


COMMANDS = {
    "defcounter":        (def_counter, ()),
    # bools
    "newbool":           (new_flag, (BOOL_NAMESPACE, True)),
    "providebool":       (new_flag, (BOOL_NAMESPACE, False)),
    "setbool":           (set_flag, (BOOL_NAMESPACE,)),
    "booltrue":          (set_flag, (BOOL_NAMESPACE, True)),
    "boolfalse":         (set_flag, (BOOL_NAMESPACE, False)),
    "ifbool":            (if_flag, (BOOL_NAMESPACE, False)),
    "notbool":           (if_flag, (BOOL_NAMESPACE, True)),
    # toggles
    "newtoggle":         (new_flag, (TOGGLE_NAMESPACE, True)),
    "providetoggle":     (new_flag, (TOGGLE_NAMESPACE, False)),
    "settoggle":         (set_flag, (TOGGLE_NAMESPACE,)),
    "toggletrue":        (set_flag, (TOGGLE_NAMESPACE, True)),
    "togglefalse":       (set_flag, (TOGGLE_NAMESPACE, False)),
    "iftoggle":          (if_flag, (TOGGLE_NAMESPACE, False)),
    "nottoggle":         (if_flag, (TOGGLE_NAMESPACE, True)),
    # macro tests
    "ifdef":             (if_def, (False,)),
    "ifcsdef":           (if_def, (False,)),
    "ifundef":           (if_def, (True,)),
    "ifcsundef":         (if_def, (True,)),
    "ifdefcounter":      (if_def_counter, ()),
    "ifcscounter":       (if_def_counter, ()),
    "ifltxcounter":      (if_def_counter, ()),
    # string tests
    "ifstrequal":        (if_str_equal, ()),
    "ifstrempty":        (if_blank, (False, False)),
    "ifblank":           (if_blank, (True, False)),
    "notblank":          (if_blank, (True, True)),
    # arithmetic tests
    "ifnumcomp":         (if_num_comp, ()),
    "ifnumequal":        (if_num_comp, ("=",)),
    "ifnumneq":          (if_num_comp, ("!=",)),
    "ifnumless":         (if_num_comp, ("<",)),
    "ifnumgreater":      (if_num_comp, (">",)),
    "ifnumleq":          (if_num_comp, ("<=",)),
    "ifnumgeq":          (if_num_comp, (">=",)),
    "ifnumeven":         (if_num_parity, (0,)),
    "ifnumodd":          (if_num_parity, (1,)),
    # lists
    "listadd":           (list_add, ()),
    "listgadd":          (list_add, ()),
    "listeadd":          (list_add, ()),
    "listxadd":          (list_add, ()),
    "listremove":        (list_remove, ()),
    "listgremove":       (list_remove, ()),
    "ifinlist":          (if_in_list, ()),
    "xifinlist":         (if_in_list, ()),
    "dolistloop":        (do_list_loop, ()),
    "forlistloop":       (for_list_loop, ()),
    "docsvlist":         (do_csv_list, ()),
    "forcsvlist":        (for_csv_list, ()),
    "DeclareListParser": (declare_list_parser, ()),
}
