"""Public entry points for evaluating arithmetic expressions."""
from typing import Optional, Tuple

from rpn_calc.common.errors import CalcError
from rpn_calc.common.logger import logger
from rpn_calc.common.operations import OperationRequest, OperationResult
from rpn_calc.common.parser import ExpressionParser
from rpn_calc.common.tokens import format_tokens


def calc(expression: str) -> Tuple[float, Optional[CalcError]]:
    """
    Evaluate an arithmetic expression and return the result together with the error, if any.

    Examples:
        - calc("10 - 2 * 3") -> (4.0, None)
        - calc("5 / 0") -> (0.0, DivisionByZeroError(...))

    :param str expression: Arithmetic expression string

    :return: Tuple of (result, None) on success, (0.0, error) on failure
    :rtype: Tuple[float, Optional[CalcError]]
    """
    try:
        return ExpressionParser.evaluate(expression), None
    except CalcError as exc:
        logger.debug("Could not evaluate %r: %s", expression, exc)
        return 0.0, exc


def evaluate_operation(request: OperationRequest) -> OperationResult:
    """
    Evaluate the expression of a request and wrap the outcome into an OperationResult.

    :param OperationRequest request: Expression to evaluate

    :return: Result carrying either the value or the error message and kind
    :rtype: OperationResult
    """
    logger.info(f"🧮🏁 Evaluating: {request.expression!r}")

    try:
        rpn = ExpressionParser.to_rpn(ExpressionParser.tokenize(request.expression))
        logger.debug(f"🧮 RPN: {format_tokens(rpn)}")
        result = ExpressionParser.evaluate_rpn(rpn)

    except CalcError as exc:
        logger.error(
            f"🧮❌ {exc.kind.value}: {exc}\n" \
            f"Invalid arithmetic expression, could not evaluate: {request.expression!r}"
        )
        return OperationResult(
            expression=request.expression,
            error=str(exc),
            error_kind=exc.kind,
        )

    logger.info(f"🧮✅ {request.expression!r} = {result}")
    return OperationResult(expression=request.expression, result=result)
