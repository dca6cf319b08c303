"""Command-script parser — tokenizer and alias expander.

A command script drives a MacroSession without a TeX host, one command per
line:

    newcounter section
    newcounter subsection [section]
    \\stepcounter{section}       % comment
    counterwithin* figure section
    ifnumcomp {2*3} < 7 yes no
    forcsvlist \\item "a, {b, c}"

Responsibilities
----------------
- Strip ``%`` comments, keeping ``%`` inside double quotes and ``\\%``
- Split lines into [COMMAND, arg1, arg2, …] tokens, keeping backslashes
- Glue ``\\cmd{a}{b}`` style arguments into separate tokens
- Apply aliases from settings.ini [COMMANDS]
- Split the command token into its name and star
"""
from __future__ import annotations

import shlex
from typing import Callable

from texmacros.core.constants import COMMENT_PREFIX, CS_PREFIX

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def strip_comment(line: str) -> str:
    """Return line with trailing comment (% …) removed.

    A '%' inside a double-quoted string or escaped as ``\\%`` is kept.
    """
    in_str = False
    prev = ""
    for i, ch in enumerate(line):
        if ch == '"':
            in_str = not in_str
        elif ch == COMMENT_PREFIX and not in_str and prev != "\\":
            return line[:i]
        prev = ch
    return line


def _split_groups(token: str) -> list[str]:
    """``\\cmd{a}{b}`` → ``["\\cmd", "{a}", "{b}"]``.

    Anything else is returned untouched: tokens without a group, unbalanced
    braces and text outside the groups (``\\cmd{a}x{b}``) are left for the
    command to report.  ``\\{`` and ``\\}`` do not open or close a group.
    """
    if not token.startswith(CS_PREFIX):
        return [token]
    head_end = token.find("{")
    if head_end <= len(CS_PREFIX) or token[head_end - 1] == "\\":
        return [token]
    parts = [token[:head_end]]
    depth = 0
    start = head_end
    prev = ""
    for i in range(head_end, len(token)):
        ch = token[i]
        if prev == "\\":
            prev = ""   # an escaped character escapes nothing itself
            continue
        if depth == 0 and ch != "{":
            return [token]
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                parts.append(token[start:i + 1])
        prev = ch
    if depth != 0:
        return [token]
    return parts


def tokenize(line: str) -> list[str]:
    """Split one source line into a token list.

    Returns an empty list for blank/comment-only lines.
    Quoted arguments (e.g. ``docsvlist "a, b"``) are kept as one token
    without surrounding quotes.  Backslashes are never treated as escapes.
    """
    stripped = strip_comment(line).strip()
    if not stripped:
        return []
    lexer = shlex.shlex(stripped, posix=True)
    lexer.whitespace_split = True
    lexer.escape = ""
    lexer.commenters = ""
    try:
        tokens = list(lexer)
    except ValueError:
        # Malformed quotes: fall back to simple split
        tokens = stripped.split()
    if not tokens:
        return []
    return _split_groups(tokens[0]) + tokens[1:]


def split_command(token: str) -> tuple[str, bool]:
    """``\\counterwithin*`` → ``("counterwithin", True)``."""
    name = token[len(CS_PREFIX):] if token.startswith(CS_PREFIX) else token
    star = name.endswith("*") and len(name) > 1
    if star:
        name = name[:-1]
    return name, star


def expand_sugar(
    tokens:    list[str],
    sugar_map: dict[str, str],
    is_known:  Callable[[str], bool] | None = None,
) -> list[str]:
    """Replace an alias command with its canonical equivalent.

    A star on the alias carries over to the canonical command.  With
    ``is_known`` the alias only applies when the target is a real command.

    Examples
    --------
    >>> expand_sugar(["step", "section"], {"step": "stepcounter"})
    ['stepcounter', 'section']
    """
    if not tokens:
        return tokens
    name, star = split_command(tokens[0])
    canonical = sugar_map.get(name)
    if canonical is None:
        return tokens
    if is_known is not None and not is_known(canonical):
        return tokens
    return [canonical + ("*" if star else "")] + tokens[1:]


def parse_lines(
    text:      str,
    sugar_map: dict[str, str],
    is_known:  Callable[[str], bool] | None = None,
) -> list[tuple[int, list[str]]]:
    """Convenience: tokenize every line and expand sugar aliases.

    Returns (1-based line number, tokens) for every non-empty line.
    """
    result: list[tuple[int, list[str]]] = []
    for num, raw in enumerate(text.splitlines(), start=1):
        tokens = expand_sugar(tokenize(raw), sugar_map, is_known)
        if tokens:
            result.append((num, tokens))
    return result
