"""Error taxonomy for expression tokenizing, conversion and evaluation."""
from enum import Enum


class ErrorKind(str, Enum):
    """Failure kind reported to callers."""

    INVALID_CHARACTER = "InvalidCharacter"
    MISMATCHED_PARENS = "MismatchedParens"
    INVALID_NUMBER = "InvalidNumber"
    DIVISION_BY_ZERO = "DivisionByZero"
    INSUFFICIENT_OPERANDS = "InsufficientOperands"
    MALFORMED_EXPRESSION = "MalformedExpression"


class CalcError(ValueError):
    """Base class for every error raised while evaluating an expression."""

    kind: ErrorKind


class LexError(CalcError):
    """Raised by the tokenizer."""


class InvalidCharacterError(LexError):
    """Character outside digits, '.', whitespace and '+-*/()'."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")


class ExpressionSyntaxError(CalcError):
    """Raised by the infix to postfix converter."""


class MismatchedParensError(ExpressionSyntaxError):
    kind = ErrorKind.MISMATCHED_PARENS

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


class EvalError(CalcError):
    """Raised by the postfix evaluator."""


class InvalidNumberError(EvalError):
    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid number: {text!r}")


class DivisionByZeroError(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class InsufficientOperandsError(EvalError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Invalid expression (not enough operands for {operator!r})")


class MalformedExpressionError(EvalError):
    """Final value stack does not hold exactly one value."""

    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(f"Invalid expression ({remaining} values left on the stack, expected 1)")
