"""texmacros — run counter/etoolbox command scripts.

    python main.py chapter1.tmx chapter2.tmx
    python main.py --settings my.ini -

Each script is processed as its own document; results are printed one per
line on stdout, log messages go to stderr.
"""
import argparse
import sys
from pathlib import Path

from texmacros.core.dispatcher import Dispatcher
from texmacros.core.errors import MacroError
from texmacros.core.parser import parse_lines
from texmacros.core.runner import ScriptRunner
from texmacros.core.session import MacroSession
from texmacros.core.settings_manager import SettingsManager

BASE_DIR = Path(__file__).parent

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="texmacros", description=__doc__.splitlines()[0])
    ap.add_argument("scripts", nargs="+", help="command script files ('-' for stdin)")
    ap.add_argument("--settings", type=Path, default=BASE_DIR / "settings.ini")
    ap.add_argument("--log-level", choices=_LEVELS, default="WARNING")
    ap.add_argument("--stop-on-error", action="store_true", default=None)
    ns = ap.parse_args(argv)

    min_level = _LEVELS.index(ns.log_level)

    def log(level: str, msg: str) -> None:
        if _LEVELS.index(level) >= min_level:
            print(f"[{level}] {msg}", file=sys.stderr)

    settings = SettingsManager(ns.settings)
    stop_on_error = settings.stop_on_error if ns.stop_on_error is None else ns.stop_on_error

    session = MacroSession.from_settings(settings)
    dispatcher = Dispatcher(session, log_fn=log)
    runner = ScriptRunner(dispatcher, log_fn=log, stop_on_error=stop_on_error, on_output=print)

    for script in ns.scripts:
        text = sys.stdin.read() if script == "-" else Path(script).read_text(encoding="utf-8")
        session.begin_document()
        log("INFO", f"Processing {script}")
        try:
            runner.run(parse_lines(text, settings.syntax_sugar, dispatcher.has))
        except MacroError:
            return 1
    return 1 if runner.error_count else 0


if __name__ == "__main__":
    sys.exit(main())
