"""Brace-aware list splitting for \\docsvlist and declared list parsers.

``separate("a, {b,c}, d", ",")`` → ``["a", "b,c", "d"]``

- Only separators at brace depth 0 split.
- A top-level ``{...}`` group is kept whole and loses its outer braces.
- Whitespace right after a separator is skipped.
- ``\\{`` and ``\\}`` are literal and do not change the depth.
"""
from __future__ import annotations

from texmacros.core.errors import ExtraCloseBrace, MissingCloseBrace


def separate(text: str, separator: str) -> list[str]:
    """Split ``text`` on every top-level ``separator``.

    Empty input gives an empty list; otherwise the result has exactly one
    more item than the number of top-level separators.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if text == "":
        return []

    items: list[str] = []
    current: list[str] = []
    depth = 0
    prev = ""
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        escaped = prev == "\\"

        if ch == "{" and not escaped:
            if depth > 0:
                current.append(ch)
            depth += 1
        elif ch == "}" and not escaped:
            if depth == 0:
                raise ExtraCloseBrace()
            depth -= 1
            if depth > 0:
                current.append(ch)
        elif depth == 0 and text.startswith(separator, i):
            items.append("".join(current))
            current = []
            i += len(separator)
            while i < n and text[i].isspace():
                i += 1
            prev = ""
            continue
        else:
            current.append(ch)

        # a backslash that escaped the previous character does not escape this one
        prev = "" if escaped and ch == "\\" else ch
        i += 1

    if depth > 0:
        raise MissingCloseBrace()
    items.append("".join(current))
    return items
