"""Shared test fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `texmacros.*` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from texmacros.core.arguments import TokenArguments  # noqa: E402
from texmacros.core.dispatcher import Dispatcher      # noqa: E402
from texmacros.core.session import MacroSession       # noqa: E402


@pytest.fixture
def session():
    return MacroSession()


@pytest.fixture
def logs():
    return []


@pytest.fixture
def dispatcher(session, logs):
    return Dispatcher(session, log_fn=lambda lvl, msg: logs.append((lvl, msg)))


@pytest.fixture
def call(dispatcher):
    """call("stepcounter", "section") → dispatcher result."""
    def _call(command: str, *tokens: str, star: bool = False):
        return dispatcher.call(command, TokenArguments(list(tokens), star=star))
    return _call
