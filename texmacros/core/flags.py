"""Boolean flags for \\newbool / \\newtoggle and friends.

Flags are keyed by ``(namespace, name)``.  ``bool`` and ``toggle`` are
separate namespaces, so ``\\newbool{draft}`` and ``\\newtoggle{draft}`` are
two independent flags.  A flag must be created before it is read or set.
"""
from __future__ import annotations

from texmacros.core.errors import DuplicateFlag, UndefinedFlag


class FlagStore:
    """Maps (namespace, name) → bool."""

    def __init__(self) -> None:
        self._flags: dict[tuple[str, str], bool] = {}

    # ------------------------------------------------------------------
    def create(self, namespace: str, name: str, error_if_defined: bool = False) -> None:
        """Define a flag as False.

        Redefining is a no-op, or DuplicateFlag with ``error_if_defined``.
        """
        key = (namespace, name)
        if key in self._flags:
            if error_if_defined:
                raise DuplicateFlag(namespace, name)
            return
        self._flags[key] = False

    def is_defined(self, namespace: str, name: str) -> bool:
        return (namespace, name) in self._flags

    def get(self, namespace: str, name: str) -> bool:
        self._require(namespace, name)
        return self._flags[(namespace, name)]

    def set(self, namespace: str, name: str, value: bool) -> None:
        self._require(namespace, name)
        self._flags[(namespace, name)] = value

    def reset(self) -> None:
        self._flags.clear()

    def as_dict(self) -> dict[tuple[str, str], bool]:
        return dict(self._flags)

    # ------------------------------------------------------------------
    def _require(self, namespace: str, name: str) -> None:
        if (namespace, name) not in self._flags:
            raise UndefinedFlag(namespace, name)

    def __repr__(self) -> str:
        return f"FlagStore({self._flags!r})"
