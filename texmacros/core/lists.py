"""Named ordered lists for \\listadd, \\listremove, \\ifinlist and loops.

Lists keep insertion order and duplicates.  ``add`` silently drops empty
items (as etoolbox does); ``remove`` takes out the first exact match only.

The store also remembers list parsers declared with \\DeclareListParser,
since they share the list lifetime and are cleared with it.
"""
from __future__ import annotations

from dataclasses import dataclass

from texmacros.core.errors import DuplicateList, UndefinedList


@dataclass(frozen=True)
class ListParser:
    """A command declared by \\DeclareListParser{\\cs}{separator}.

    ``star`` parsers take the item handler as their first argument; plain
    ones always expand to ``\\do``.
    """
    separator: str
    star:      bool = False


class ListStore:
    """Maps list name → list[str]."""

    def __init__(self) -> None:
        self._lists:   dict[str, list[str]]  = {}
        self._parsers: dict[str, ListParser] = {}

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def create(self, name: str, error_if_defined: bool = False) -> None:
        if name in self._lists:
            if error_if_defined:
                raise DuplicateList(name)
            return
        self._lists[name] = []

    def is_defined(self, name: str) -> bool:
        return name in self._lists

    def get(self, name: str) -> list[str]:
        """Return a copy of the list's items."""
        return list(self._require(name))

    def add(self, name: str, item: str) -> None:
        items = self._require(name)
        if item == "":
            return
        items.append(item)

    def remove(self, name: str, item: str) -> bool:
        """Remove the first ``item``; False if it was not there."""
        items = self._require(name)
        try:
            items.remove(item)
        except ValueError:
            return False
        return True

    def contains(self, name: str, item: str) -> bool:
        return item in self._require(name)

    def _require(self, name: str) -> list[str]:
        items = self._lists.get(name)
        if items is None:
            raise UndefinedList(name)
        return items

    # ------------------------------------------------------------------
    # Declared list parsers
    # ------------------------------------------------------------------

    def declare_parser(self, cs: str, separator: str, star: bool = False) -> ListParser:
        parser = ListParser(separator=separator, star=star)
        self._parsers[cs] = parser
        return parser

    def get_parser(self, cs: str) -> ListParser | None:
        return self._parsers.get(cs)

    def parser_names(self) -> list[str]:
        return list(self._parsers)

    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._lists.clear()
        self._parsers.clear()

    def as_dict(self) -> dict[str, list[str]]:
        return {name: list(items) for name, items in self._lists.items()}

    def __repr__(self) -> str:
        return f"ListStore({self._lists!r})"
