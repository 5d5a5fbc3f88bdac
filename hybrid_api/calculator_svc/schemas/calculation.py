"""
Pydantic schemas for calculator requests and responses.

A request names an operation and two operands.  The ``operation``
field is a free string on purpose: unknown tags must reach the
arithmetic layer so that they fail with the same
``InvalidOperationError`` whether the calculator runs locally or behind
HTTP.  The recognised tags are listed by ``Operation``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Operation(str, Enum):
    """Operation tags understood by the calculator."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class CalculationRequest(BaseModel):
    """Schema for a single calculation."""

    operation: str = Field(..., description="One of add, subtract, multiply, divide")
    a: float = Field(..., description="Left operand")
    b: float = Field(..., description="Right operand")


class CalculationResponse(BaseModel):
    """Schema for a successful calculation.

    ``result`` is the field the SDK decodes; keep both sides in sync.
    Overflowed results are written as ``Infinity``/``-Infinity``.
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    result: float


class ErrorResponse(BaseModel):
    error: str
