"""Parse and evaluate arithmetic expressions safely."""
from collections.abc import Callable as ABCCallable
import math
import operator
import string
from typing import Callable, List, Tuple

from rpn_calc.common.errors import (
    DivisionByZeroError,
    InsufficientOperandsError,
    InvalidCharacterError,
    InvalidNumberError,
    MalformedExpressionError,
    MismatchedParensError,
)
from rpn_calc.common.tokens import LeftParen, Number, Operator, RightParen, Token, UnaryMinus


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of binary operator symbols to (precedence, function)
OPERATORS: dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, operator.truediv),
}

# Unary minus binds tighter than every binary operator
UNARY_MINUS_PRECEDENCE: int = 3

NUMBER_CHARS: str = string.digits + "."


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Safe, deterministic computation
        - Every stage stops at the first error

    Algorithm:
        1. Tokenize character by character, classifying unary and binary minus
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    The Shunting-yard algorithm converts an infix expression into Reverse Polish Notation (RPN), allowing safe, stack-based evaluation without parentheses.
    It handles operator precedence by temporarily storing operators on a stack and outputting them in the correct order.

    Examples:
        - Infix expression (standard notation): 3 + 4 * 2
        - Corresponding Reverse Polish Notation (RPN): 3 4 2 * +
        - Infix expression with unary minus: -(2 + 3)
        - Corresponding RPN, "_" being the unary minus: 2 3 + _
    """

    @staticmethod
    def _is_unary_minus(expr: str, index: int, tokens: List[Token]) -> bool:
        """
        Decide whether the "-" at ``expr[index]`` is a unary minus.

        A minus is unary when nothing has been emitted yet, right after a "(" token,
        or when the raw character just before it is an operator.
        Whitespace counts for the raw character check, so "2 * -3" keeps a binary minus.

        :param str expr: Arithmetic expression being tokenized
        :param int index: Position of the "-" character
        :param List[Token] tokens: Tokens emitted so far

        :return: True for a unary minus, False for a binary one
        :rtype: bool
        """
        if not tokens:
            return True
        if isinstance(tokens[-1], LeftParen):
            return True
        return expr[index - 1] in OPERATORS

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        Whitespace between tokens is optional (e.g., "3+4 * 2").

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[Token]
        :raises InvalidCharacterError: If a character is not part of the grammar
        """
        tokens: List[Token] = []
        pending: List[str] = []

        for index, char in enumerate(expr):
            if char in NUMBER_CHARS:
                pending.append(char)
                continue

            # Any other character ends the current number
            if pending:
                tokens.append(Number(text="".join(pending)))
                pending.clear()

            if char.isspace():
                continue

            if char == "-" and ExpressionParser._is_unary_minus(expr, index, tokens):
                tokens.append(UnaryMinus())
            elif char in OPERATORS:
                tokens.append(Operator(symbol=char))
            elif char == "(":
                tokens.append(LeftParen())
            elif char == ")":
                tokens.append(RightParen())
            else:
                raise InvalidCharacterError(char, index)

        if pending:
            tokens.append(Number(text="".join(pending)))

        return tokens

    @staticmethod
    def _precedence(token: Token) -> int:
        """
        Precedence of an operator token, 0 for anything else (e.g. a left parenthesis).

        :param Token token: Token found on the operator stack

        :return: Precedence level
        :rtype: int
        """
        if isinstance(token, UnaryMinus):
            return UNARY_MINUS_PRECEDENCE
        if isinstance(token, Operator):
            return OPERATORS[token.symbol][0]
        return 0

    @staticmethod
    def to_rpn(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

        Binary operators are left-associative: "10 - 2 - 3" becomes "10 2 - 3 -".

        :param List[Token] tokens: List of arithmetic tokens

        :return: List of tokens in RPN order, without parentheses
        :rtype: List[Token]
        :raises MismatchedParensError: If parentheses are unbalanced
        """
        output: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if isinstance(token, Number):
                # Numbers are added directly to the output
                output.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            elif isinstance(token, RightParen):
                # Unwind the group down to its opening parenthesis
                while stack and not isinstance(stack[-1], LeftParen):
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParensError("Mismatched parentheses: unexpected ')'")
                stack.pop()
            else:
                # Operator: pop operators from stack with higher or equal precedence
                prec = ExpressionParser._precedence(token)
                while stack and ExpressionParser._precedence(stack[-1]) >= prec:
                    output.append(stack.pop())
                stack.append(token)

        # Append remaining operators in reverse order (stack top first)
        while stack:
            token = stack.pop()
            if isinstance(token, LeftParen):
                raise MismatchedParensError("Mismatched parentheses: unclosed '('")
            output.append(token)

        return output

    @staticmethod
    def evaluate_rpn(rpn: List[Token]) -> float:
        """
        Evaluate a list of tokens in Reverse Polish Notation using a stack.

        :param List[Token] rpn: Tokens in RPN order

        :return: Computed result as float
        :rtype: float
        :raises InvalidNumberError: If a numeric literal cannot be parsed
        :raises DivisionByZeroError: If a division has a zero right operand
        :raises InsufficientOperandsError: If an operator lacks operands
        :raises MalformedExpressionError: If the stack does not end with exactly one value
        """
        stack: List[float] = []

        for token in rpn:
            if isinstance(token, Number):
                try:
                    value: float = float(token.text)
                except ValueError:
                    raise InvalidNumberError(token.text) from None
                # Literal out of float range
                if math.isinf(value):
                    raise InvalidNumberError(token.text)
                stack.append(value)
            elif isinstance(token, UnaryMinus):
                if not stack:
                    raise InsufficientOperandsError(str(token))
                stack[-1] = -stack[-1]
            elif isinstance(token, Operator):
                # Operator requires two operands
                if len(stack) < 2:
                    raise InsufficientOperandsError(token.symbol)
                b: float = stack.pop()
                a: float = stack.pop()
                if token.symbol == "/" and b == 0:
                    raise DivisionByZeroError()
                stack.append(OPERATORS[token.symbol][1](a, b))

        if len(stack) != 1:
            raise MalformedExpressionError(len(stack))

        return stack[0]

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises CalcError: On the first error raised by any stage
        """
        tokens: List[Token] = ExpressionParser.tokenize(expr)
        rpn: List[Token] = ExpressionParser.to_rpn(tokens)
        return ExpressionParser.evaluate_rpn(rpn)
