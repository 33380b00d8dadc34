from typing import Optional


class ArithError(Exception):
    """Base class for every error raised while lexing, parsing or evaluating."""
    kind = 'ArithError'

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line})"


class LexError(ArithError):
    kind = 'LexError'

    def __init__(self, character: str, line: int):
        super().__init__(f"unrecognized character {character!r}", line)
        self.character = character


class ParseError(ArithError):
    kind = 'ParseError'


class UndefinedNameError(ArithError):
    kind = 'UndefinedNameError'

    def __init__(self, name: str):
        super().__init__(f"undefined name {name}")
        self.name = name


class DivisionByZeroError(ArithError):
    kind = 'DivisionByZeroError'


class ArityMismatchError(ArithError):
    kind = 'ArityMismatchError'

    def __init__(self, name: str, expected: int, got: int):
        super().__init__(f"{name} expects {expected} arguments, got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class TypeMismatchError(ArithError):
    """A function used where a number is required, or the other way round."""
    kind = 'TypeError'


class RecursionLimitError(ArithError):
    kind = 'RecursionLimitError'
