"""
Calculator SDK.

Callers that need the calculator capability obtain a
:class:`CalculatorSdk` from :func:`new_calculator_sdk` and call
``sdk.compute(request)``.  The SDK comes in two variants with the same
shape:

* ``local`` – evaluates the request in‑process through
  :class:`CalculatorService`.  No I/O.
* ``remote`` – POSTs the request to ``<base_url>/calculator`` of a
  running calculator service using ``requests``.

The variant is chosen once, at construction, from a mode tag
(``"remote"`` or its alias ``"http"`` selects the remote variant;
anything else, including ``None``, selects the local one).  Both
variants return a tuple ``(result, error)``: on success ``result`` is a
float and ``error`` is ``None``; on failure ``result`` is ``None`` and
``error`` is a :class:`~hybrid_api.core.errors.CalculatorError`.  Errors
are never raised, so a caller can be handed either variant without
changing its error handling.

The remote variant resolves its base URL when ``compute`` is called,
not when the SDK is built: an explicit ``base_url`` wins, otherwise the
``CALCULATOR_SERVICE_URL`` setting is used.  No retry is performed, and
no timeout is applied unless one is configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable, Optional, Tuple

import requests

from hybrid_api.calculator_svc.schemas.calculation import CalculationRequest
from hybrid_api.calculator_svc.services.calculator_service import CalculatorService
from hybrid_api.core.config import SERVICE_URL_VARIABLE, get_sdk_settings, get_service_url
from hybrid_api.core.errors import (
    CalculatorError,
    ConfigurationError,
    DecodeError,
    InvalidOperationError,
    RemoteError,
    TransportError,
)


logger = logging.getLogger(__name__)

LOCAL_MODE = "local"
REMOTE_MODE = "remote"
# "http" is the tag older deployments use for the remote variant.
_REMOTE_ALIASES = {REMOTE_MODE, "http"}

Result = Tuple[Optional[float], Optional[CalculatorError]]
ComputeFunc = Callable[[CalculationRequest], Result]


@dataclass(frozen=True)
class CalculatorSdk:
    """A calculator bound to one execution mode.

    Attributes:
        mode: ``"local"`` or ``"remote"``.
        compute: Callable evaluating a :class:`CalculationRequest` and
            returning ``(result, error)``.
    """

    mode: str
    compute: ComputeFunc


def resolve_mode(mode: Optional[str]) -> str:
    """Normalise a mode tag; unknown or missing tags mean local."""
    if mode and mode.strip().lower() in _REMOTE_ALIASES:
        return REMOTE_MODE
    return LOCAL_MODE


def new_calculator_sdk(
    mode: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> CalculatorSdk:
    """Build a calculator SDK for ``mode``.

    Args:
        mode: ``"local"``, ``"remote"`` or ``"http"``.  Anything else
            selects the local variant.
        base_url: Remote only.  Overrides ``CALCULATOR_SERVICE_URL``.
        session: Remote only.  Object with a ``requests``‑style ``post``
            method; defaults to the ``requests`` module itself.
        timeout: Remote only.  Seconds to wait for the service; ``None``
            waits indefinitely.
    """
    if resolve_mode(mode) == REMOTE_MODE:
        return CalculatorSdk(
            mode=REMOTE_MODE,
            compute=_remote_compute(base_url=base_url, session=session, timeout=timeout),
        )
    return CalculatorSdk(mode=LOCAL_MODE, compute=CalculatorService.compute)


def new_calculator_sdk_from_settings() -> CalculatorSdk:
    """Build the SDK described by ``CALCULATOR_SDK_MODE`` and ``CALCULATOR_SDK_TIMEOUT``.

    Raises ``ConfigurationError`` if ``CALCULATOR_SDK_TIMEOUT`` is not a number.
    """
    current = get_sdk_settings()
    return new_calculator_sdk(current.calculator_sdk_mode, timeout=current.calculator_sdk_timeout)


def _remote_compute(
    *,
    base_url: Optional[str],
    session: Optional[Any],
    timeout: Optional[float],
) -> ComputeFunc:
    http = session if session is not None else requests

    def compute(request: CalculationRequest) -> Result:
        url = base_url or get_service_url()
        if not url:
            return None, ConfigurationError(f"{SERVICE_URL_VARIABLE} environment variable not set")

        endpoint = f"{url.rstrip('/')}/calculator"
        try:
            logger.debug("Sending POST request to %s", endpoint)
            response = http.post(endpoint, json=request.model_dump(), timeout=timeout)
        except requests.RequestException as exc:
            logger.error("Calculator request failed: %s", exc)
            return None, TransportError(f"failed to call calculator service: {exc}", cause=exc)

        if response.status_code != HTTPStatus.OK:
            body = _json_body(response)
            rejected = response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
            if rejected and isinstance(body, dict) and body.get("error"):
                return None, InvalidOperationError(str(body["error"]))
            message = _error_message(response)
            logger.error("Calculator request failed (%s): %s", response.status_code, message)
            return None, RemoteError(response.status_code, message)

        try:
            payload = response.json()
        except ValueError as exc:
            return None, DecodeError(f"failed to decode response: {exc}")
        value = payload.get("result") if isinstance(payload, dict) else None
        # bool is an int subclass but never a valid result.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None, DecodeError(f"failed to decode response: no numeric 'result' in {payload!r}")
        return float(value), None

    return compute


def _json_body(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(response: Any) -> str:
    """Extract a server error message, falling back to the raw body."""
    body = _json_body(response)
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail") or body.get("message")
        if message:
            return str(message)
    if body is not None:
        return str(body)
    return (response.text or "").strip()
