"""Argument access for command handlers.

The host macro processor owns the TeX input; handlers pull their
already-delimited arguments through the ``ArgumentSource`` protocol, one at
a time and in order, exactly as a TeX primitive would read them:

    get_argument(name)                 → next {…} or single-token argument
    get_bracket_argument(name, default) → next optional […] argument
    get_star()                         → True if the command was starred

``TokenArguments`` implements the protocol over a plain token list and is
what the script runner and the tests use.

Helpers
-------
get_cs_name          — normalise and validate a control-sequence name
get_cs_name_argument — same, reading the next argument
get_cs_name_brackets — same, reading an optional argument (None if absent)
get_number           — read a leading signed integer (InvalidNumber if none)
"""
from __future__ import annotations

import re
from typing import Protocol

from texmacros.core.constants import CS_PREFIX
from texmacros.core.errors import (
    IllegalControlSequenceName, InvalidNumber, MissingArgument, MissingControlSequence,
)

_CS_NAME_RE = re.compile(r"(.|[a-z]+)", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class ArgumentSource(Protocol):
    def get_argument(self, name: str) -> str: ...

    def get_bracket_argument(self, name: str, default: str = "") -> str: ...

    def get_star(self) -> bool: ...


# ---------------------------------------------------------------------------
# Token-list implementation
# ---------------------------------------------------------------------------

def _unwrap(token: str) -> str:
    """Strip one pair of braces if they enclose the whole token."""
    if len(token) < 2 or token[0] != "{" or token[-1] != "}":
        return token
    depth = 0
    prev = ""
    for i, ch in enumerate(token):
        if prev != "\\":
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0 and i != len(token) - 1:
                    return token   # "{a}{b}": first group closes early
        prev = ch
    return token[1:-1] if depth == 0 else token


class TokenArguments:
    """ArgumentSource over a list of already-split tokens."""

    def __init__(self, tokens: list[str], star: bool = False) -> None:
        self._tokens = list(tokens)
        self._pos    = 0
        self._star   = star

    def get_argument(self, name: str) -> str:
        if self._pos >= len(self._tokens):
            raise MissingArgument(name)
        token = self._tokens[self._pos]
        self._pos += 1
        return _unwrap(token)

    def get_bracket_argument(self, name: str, default: str = "") -> str:
        if self._pos < len(self._tokens):
            token = self._tokens[self._pos]
            if len(token) >= 2 and token[0] == "[" and token[-1] == "]":
                self._pos += 1
                return token[1:-1]
        return default

    def get_star(self) -> bool:
        return self._star

    @property
    def remaining(self) -> list[str]:
        """Tokens nobody asked for."""
        return self._tokens[self._pos:]


# ---------------------------------------------------------------------------
# Control-sequence names
# ---------------------------------------------------------------------------

def get_cs_name(raw: str, name: str, require_backslash: bool = False) -> str:
    """Return the control-sequence name in ``raw`` without its backslash.

    ``name`` is the calling command, used in error messages.
    """
    cs = raw.strip()
    if cs.startswith(CS_PREFIX):
        cs = cs[1:]
    elif require_backslash:
        raise MissingControlSequence(name)
    if not _CS_NAME_RE.fullmatch(cs):
        raise IllegalControlSequenceName(name)
    return cs


def get_cs_name_argument(args: ArgumentSource, name: str, require_backslash: bool = False) -> str:
    return get_cs_name(args.get_argument(name), name, require_backslash)


def get_cs_name_brackets(args: ArgumentSource, name: str, require_backslash: bool = False) -> str | None:
    optional = args.get_bracket_argument(name, "")
    if optional == "":
        return None
    return get_cs_name(optional, name, require_backslash)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_number(text: str) -> int:
    """Leading signed integer of ``text``: ``"12pt"`` → 12, ``"x"`` → error."""
    m = _LEADING_INT_RE.match(text)
    if m is None:
        raise InvalidNumber(text)
    return int(m.group(1))


def get_number(args: ArgumentSource, name: str) -> int:
    return parse_number(args.get_argument(name))
