"""Centralised tunables and magic strings.

Everything that controls runtime behaviour and is shared between modules is
collected here so it is easy to find, document, and adjust.
"""

# ---------------------------------------------------------------------------
# Expression evaluator  (texmacros/core/expression.py)
# ---------------------------------------------------------------------------
DIVISION_TRUE  = "true"    # 7/2 → 3.5
DIVISION_ROUND = "round"   # 7/2 → 4  (e-TeX \numexpr rounding)
DIVISION_MODES = (DIVISION_TRUE, DIVISION_ROUND)
DEFAULT_DIVISION = DIVISION_TRUE

# ---------------------------------------------------------------------------
# Flags  (texmacros/core/flags.py)
# ---------------------------------------------------------------------------
BOOL_NAMESPACE   = "bool"
TOGGLE_NAMESPACE = "toggle"

# ---------------------------------------------------------------------------
# Commands  (texmacros/core/*_commands.py)
# ---------------------------------------------------------------------------
CS_PREFIX        = "\\"
THE_PREFIX       = "the"      # \the<counter>
DEFAULT_HANDLER  = "do"       # \dolistloop / \docsvlist item handler
CSV_SEPARATOR    = ","

# ---------------------------------------------------------------------------
# Script front end  (texmacros/core/parser.py, runner.py)
# ---------------------------------------------------------------------------
COMMENT_PREFIX   = "%"
RESET_KEYWORD    = "reset"
