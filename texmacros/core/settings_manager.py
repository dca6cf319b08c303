"""Settings manager — reads settings.ini via configparser.

Sections
--------
[GENERAL]   stop_on_error = false
[NUMEXPR]   division      = true | round
[COUNTERS]  name = reset_by   (empty value: no reset_by), in creation order
[COMMANDS]  alias = canonical  (script aliases)

Keys are case-sensitive, since LaTeX command names are (``roman`` vs
``Roman``).
"""
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

from texmacros.core.constants import DEFAULT_DIVISION, DIVISION_MODES


class SettingsManager:
    def __init__(self, ini_path: Path) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(comment_prefixes=("#", ";"), inline_comment_prefixes=("#", ";"))
        self.config.optionxform = str
        if ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    # ------------------------------------------------------------------
    # Generic getters
    # ------------------------------------------------------------------
    def get(self, section: str, key: str, fallback: str = "") -> str:
        return self.config.get(section, key, fallback=fallback)

    def getbool(self, section: str, key: str, fallback: bool = False) -> bool:
        return self.config.getboolean(section, key, fallback=fallback)

    # ------------------------------------------------------------------
    # Convenience properties
    # ------------------------------------------------------------------
    @property
    def stop_on_error(self) -> bool:
        return self.getbool("GENERAL", "stop_on_error", False)

    @property
    def division(self) -> str:
        """Division mode for integer expressions; unknown values fall back."""
        mode = self.get("NUMEXPR", "division", DEFAULT_DIVISION).strip().lower()
        return mode if mode in DIVISION_MODES else DEFAULT_DIVISION

    @property
    def predefined_counters(self) -> list[tuple[str, Optional[str]]]:
        """(name, reset_by) pairs from [COUNTERS], in file order."""
        if not self.config.has_section("COUNTERS"):
            return []
        return [(name, parent.strip() or None) for name, parent in self.config.items("COUNTERS")]

    @property
    def syntax_sugar(self) -> dict[str, str]:
        """Return alias→canonical mapping from [COMMANDS] section."""
        if not self.config.has_section("COMMANDS"):
            return {}
        return {k: v.strip() for k, v in self.config.items("COMMANDS")}
