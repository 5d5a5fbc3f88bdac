"""
Arithmetic operations backing the calculator service.

``CalculatorService.calculate`` raises ``InvalidOperationError`` for
requests it cannot satisfy.  ``CalculatorService.compute`` wraps it in
the ``(result, error)`` convention used by the SDK.  Results follow
native float semantics with no rounding.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from hybrid_api.calculator_svc.schemas.calculation import CalculationRequest, Operation
from hybrid_api.core.errors import CalculatorError, InvalidOperationError


logger = logging.getLogger(__name__)


class CalculatorService:
    """Stateless arithmetic over a ``CalculationRequest``."""

    @classmethod
    def calculate(cls, request: CalculationRequest) -> float:
        """Return the result of ``request`` or raise ``InvalidOperationError``."""
        op = request.operation
        if op == Operation.ADD.value:
            return request.a + request.b
        if op == Operation.SUBTRACT.value:
            return request.a - request.b
        if op == Operation.MULTIPLY.value:
            return request.a * request.b
        if op == Operation.DIVIDE.value:
            if request.b == 0:
                raise InvalidOperationError("division by zero is not allowed")
            return request.a / request.b
        raise InvalidOperationError("invalid operation specified")

    @classmethod
    def compute(cls, request: CalculationRequest) -> Tuple[Optional[float], Optional[CalculatorError]]:
        try:
            return cls.calculate(request), None
        except InvalidOperationError as exc:
            logger.debug("Rejected %s(%s, %s): %s", request.operation, request.a, request.b, exc)
            return None, exc
