"""Pydantic models for arithmetic operation requests and results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rpn_calc.common.errors import ErrorKind


class OperationRequest(BaseModel):
    """Represents a single arithmetic expression to evaluate."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Arithmetic expression as a string")


class OperationResult(BaseModel):
    """Represents the outcome of an evaluated arithmetic expression: a result or an error."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[str] = Field(default=None, description="Error message when evaluation failed")
    error_kind: Optional[ErrorKind] = Field(default=None, description="Failure kind when evaluation failed")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure that exactly one of result and error is set, and that error_kind goes with error."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' and 'error' must be set")
        if (self.error is None) != (self.error_kind is None):
            raise ValueError("'error_kind' must be set together with 'error'")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
