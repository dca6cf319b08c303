"""Script runner — executes parsed command lines against a Dispatcher.

Usage
-----
    runner = ScriptRunner(dispatcher, log_fn=print_log)
    outputs = runner.run(parse_lines(text, settings.syntax_sugar))

Every command that produces a value (``\\value``, ``\\thesection``,
``\\ifbool`` …) contributes one string to the returned outputs.

The keyword ``reset`` on a line of its own starts a new document: every
store is cleared and the predefined counters are recreated.

Errors
------
A MacroError on one line is logged at ERROR with its line number and kind;
the run continues with the next line unless ``stop_on_error`` is set, in
which case the error propagates to the caller.
"""
from __future__ import annotations

from typing import Callable

from texmacros.core.arguments import TokenArguments
from texmacros.core.constants import RESET_KEYWORD
from texmacros.core.dispatcher import Dispatcher
from texmacros.core.errors import MacroError
from texmacros.core.parser import split_command

LogFn = Callable[[str, str], None]       # (level, message)


class ScriptRunner:
    """Runs (line number, tokens) pairs produced by parser.parse_lines()."""

    def __init__(
        self,
        dispatcher:    Dispatcher,
        log_fn:        LogFn | None = None,
        stop_on_error: bool = False,
        on_output:     Callable[[str], None] | None = None,
    ) -> None:
        self._dispatcher    = dispatcher
        self._log           = log_fn or (lambda lvl, msg: None)
        self._stop_on_error = stop_on_error
        self._on_output     = on_output or (lambda text: None)
        self.error_count    = 0

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def run(self, lines: list[tuple[int, list[str]]]) -> list[str]:
        """Execute every line in order and return the produced outputs."""
        outputs: list[str] = []
        for line_num, tokens in lines:
            result = self._run_line(line_num, tokens)
            if result is not None:
                text = str(result)
                outputs.append(text)
                self._on_output(text)
        return outputs

    # ------------------------------------------------------------------
    def _run_line(self, line_num: int, tokens: list[str]):
        name, star = split_command(tokens[0])

        if name == RESET_KEYWORD and not star:
            self._dispatcher.session.begin_document()
            self._log("INFO", f"line {line_num}: new document")
            return None

        args = TokenArguments(tokens[1:], star=star)
        try:
            result = self._dispatcher.call(name, args)
        except MacroError as exc:
            self.error_count += 1
            self._log("ERROR", f"line {line_num}: {exc.kind}: {exc}")
            if self._stop_on_error:
                raise
            return None

        if args.remaining:
            self._log("WARNING", f"line {line_num}: {name}: extra arguments ignored: {args.remaining!r}")
        return result
