"""Error taxonomy for the counter / etoolbox macro core.

Every failure is raised synchronously to the caller.  ``kind`` is the name
the host reports (it matches the class name), the message is already
formatted for display.

MacroError
├── CounterError    — UndefinedCounter, DuplicateCounter, CounterCycle
├── FlagError       — UndefinedFlag, DuplicateFlag, InvalidFlag
├── ListError       — UndefinedList, DuplicateList
├── ArgumentError   — IllegalControlSequenceName, MissingControlSequence,
│                     InvalidArgumentOrder, InvalidNumber, InvalidRelation,
│                     MissingArgument, UnknownCommand
├── ExpressionError — MismatchedParentheses, InvalidExpression
└── BraceError      — ExtraCloseBrace, MissingCloseBrace
"""
from __future__ import annotations


class MacroError(Exception):
    """Base class for everything the core raises on purpose."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------

class CounterError(MacroError):    pass
class FlagError(MacroError):       pass
class ListError(MacroError):       pass
class ArgumentError(MacroError):   pass
class ExpressionError(MacroError): pass
class BraceError(MacroError):      pass


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------

class UndefinedCounter(CounterError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Undefined counter "{name}"')
        self.name = name


class DuplicateCounter(CounterError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Counter "{name}" already defined')
        self.name = name


class CounterCycle(CounterError):
    """``within`` would make a counter its own ancestor."""

    def __init__(self, name: str, super_name: str) -> None:
        super().__init__(
            f'Counter "{name}" cannot be placed within "{super_name}": '
            f'"{name}" is already an ancestor of "{super_name}"'
        )
        self.name = name
        self.super_name = super_name


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

class UndefinedFlag(FlagError):
    def __init__(self, namespace: str, name: str) -> None:
        super().__init__(f'Undefined {namespace} "{name}"')
        self.namespace = namespace
        self.name = name


class DuplicateFlag(FlagError):
    def __init__(self, namespace: str, name: str) -> None:
        super().__init__(f'{namespace.capitalize()} "{name}" already defined')
        self.namespace = namespace
        self.name = name


class InvalidFlag(FlagError):
    def __init__(self, value: str) -> None:
        super().__init__(f'Invalid boolean value "{value}"')
        self.value = value


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

class UndefinedList(ListError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Undefined list "{name}"')
        self.name = name


class DuplicateList(ListError):
    def __init__(self, name: str) -> None:
        super().__init__(f'List "{name}" already defined')
        self.name = name


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------

class IllegalControlSequenceName(ArgumentError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Illegal control sequence name for {command}")


class MissingControlSequence(ArgumentError):
    def __init__(self, command: str) -> None:
        super().__init__(f"{command} must be given a control sequence")


class InvalidArgumentOrder(ArgumentError):
    def __init__(self) -> None:
        super().__init__("Counter name must come before optional argument")


class InvalidNumber(ArgumentError):
    def __init__(self, text: str) -> None:
        super().__init__(f'Invalid number "{text}"')
        self.text = text


class InvalidRelation(ArgumentError):
    def __init__(self, relation: str) -> None:
        super().__init__(f"Invalid relation: {relation}")
        self.relation = relation


class MissingArgument(ArgumentError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Missing argument for {command}")


class UnknownCommand(ArgumentError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Undefined control sequence {command}")
        self.command = command


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

class MismatchedParentheses(ExpressionError):
    def __init__(self) -> None:
        super().__init__("Mismatched parentheses")


class InvalidExpression(ExpressionError):
    def __init__(self, detail: str = "Invalid expression") -> None:
        super().__init__(detail)


# ---------------------------------------------------------------------------
# Brace balance
# ---------------------------------------------------------------------------

class ExtraCloseBrace(BraceError):
    def __init__(self) -> None:
        super().__init__("Extra close brace or missing open brace")


class MissingCloseBrace(BraceError):
    def __init__(self) -> None:
        super().__init__("Missing close brace")
