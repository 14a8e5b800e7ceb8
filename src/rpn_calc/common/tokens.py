"""Lexical tokens produced by the tokenizer and consumed by the RPN stages."""
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Number(BaseModel):
    """Numeric literal, kept as raw text until evaluation."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Run of digits and decimal points")

    def __str__(self) -> str:
        return self.text


class Operator(BaseModel):
    """Binary arithmetic operator."""

    model_config = ConfigDict(frozen=True)

    symbol: Literal["+", "-", "*", "/"] = Field(..., description="Operator symbol")

    def __str__(self) -> str:
        return self.symbol


class UnaryMinus(BaseModel):
    """Prefix negation, distinct from the binary "-" operator."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "_"


class LeftParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "("


class RightParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, UnaryMinus, LeftParen, RightParen]


def format_tokens(tokens: List[Token]) -> str:
    """
    Render a token sequence as space-separated text.

    Examples:
        - [Number(text="3"), Number(text="4"), Operator(symbol="+")] -> "3 4 +"

    :param List[Token] tokens: Token sequence

    :return: Human readable representation
    :rtype: str
    """
    return " ".join(str(token) for token in tokens)
