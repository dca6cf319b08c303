"""Command dispatcher — maps LaTeX command names to handlers.

The host calls ``dispatcher.call(name, args)`` with the command name (with
or without its backslash) and an ArgumentSource positioned after it.  The
result is None, an int or text to push back into the document.

Besides the static tables in counter_commands and etoolbox_commands, two
families of commands exist only while the session defines them:

- ``\\the<counter>`` for every defined counter,
- every command declared with ``\\DeclareListParser``.

Both disappear when the session is reset.
"""
from __future__ import annotations

from functools import partial
from typing import Any, Callable

from texmacros.core import counter_commands, etoolbox_commands
from texmacros.core.arguments import ArgumentSource
from texmacros.core.constants import CS_PREFIX, THE_PREFIX
from texmacros.core.errors import UnknownCommand
from texmacros.core.session import MacroSession

LogFn   = Callable[[str, str], None]       # (level, message)
Handler = Callable[..., Any]               # (dispatcher, args, name, *params)

BUILTIN_COMMANDS: dict[str, tuple[Handler, tuple]] = {
    **counter_commands.COMMANDS,
    **etoolbox_commands.COMMANDS,
}


class Dispatcher:
    """Routes command invocations to the handlers acting on one session."""

    def __init__(self, session: MacroSession, log_fn: LogFn | None = None) -> None:
        self.session = session
        self._log    = log_fn or (lambda lvl, msg: None)

    def log(self, level: str, message: str) -> None:
        self._log(level, message)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _resolve(self, cs: str) -> Callable[..., Any] | None:
        # a declared list parser shadows a built-in of the same name
        if self.session.lists.get_parser(cs) is not None:
            return partial(_call_with_params, etoolbox_commands.run_list_parser, (cs,))

        entry = BUILTIN_COMMANDS.get(cs)
        if entry is not None:
            handler, params = entry
            return partial(_call_with_params, handler, params)

        if cs.startswith(THE_PREFIX) and cs[len(THE_PREFIX):] in self.session.counters:
            counter_name = cs[len(THE_PREFIX):]
            return partial(_call_with_params, counter_commands.the_counter, (counter_name,))
        return None

    def has(self, name: str) -> bool:
        """True if ``name`` is a command this session would accept."""
        return self._resolve(_strip_prefix(name)) is not None

    def names(self) -> list[str]:
        """Every command currently defined, sorted."""
        dynamic = {THE_PREFIX + n for n in self.session.counters.names()}
        dynamic.update(self.session.lists.parser_names())
        return sorted(dynamic.union(BUILTIN_COMMANDS))

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def call(self, name: str, args: ArgumentSource) -> Any:
        """Run the command ``name``; MacroError subclasses propagate."""
        cs = _strip_prefix(name)
        handler = self._resolve(cs)
        if handler is None:
            raise UnknownCommand(CS_PREFIX + cs)
        return handler(self, args, CS_PREFIX + cs)


def _strip_prefix(name: str) -> str:
    return name[len(CS_PREFIX):] if name.startswith(CS_PREFIX) else name


def _call_with_params(handler: Handler, params: tuple, d: Dispatcher, args: ArgumentSource, name: str) -> Any:
    return handler(d, args, name, *params)
