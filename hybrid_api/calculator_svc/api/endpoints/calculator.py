"""
Calculator endpoint.

``POST /calculator`` evaluates one ``CalculationRequest``.  A valid
request answers ``200 {"result": <number>}``; a result that overflowed
is written as the JSON constant ``Infinity``/``-Infinity``, which the
SDK's ``requests`` decoder reads back as a float.  Requests the
arithmetic layer rejects (unknown operation, division by zero) answer
``422 {"error": <message>}``; the SDK's remote variant maps that status
back to ``InvalidOperationError``.  Malformed bodies are handled by the
validation handler registered in ``main.create_app``.
"""

from http import HTTPStatus

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from hybrid_api.calculator_svc.schemas.calculation import (
    CalculationRequest,
    CalculationResponse,
    ErrorResponse,
)
from hybrid_api.calculator_svc.services.calculator_service import CalculatorService
from hybrid_api.core.errors import InvalidOperationError

router = APIRouter()


@router.post(
    "/calculator",
    response_model=CalculationResponse,
    responses={
        HTTPStatus.BAD_REQUEST.value: {"model": ErrorResponse},
        HTTPStatus.UNPROCESSABLE_ENTITY.value: {"model": ErrorResponse},
    },
)
async def calculate(request: CalculationRequest):
    """Evaluate a calculation request."""
    try:
        result = CalculatorService.calculate(request)
    except InvalidOperationError as exc:
        return JSONResponse(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY.value,
            content={"error": str(exc)},
        )
    # Serialised by pydantic directly: Starlette's JSONResponse refuses
    # non-finite floats.
    body = CalculationResponse(result=result).model_dump_json()
    return Response(content=body, media_type="application/json")
