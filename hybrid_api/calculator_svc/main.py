"""
Main entrypoint for the calculator service.

This module assembles the FastAPI application and exposes the
zero‑argument ``entrypoint`` coroutine that the launcher registry uses
to start the service.  ``create_app`` builds the app, which is then
instantiated at module import time as ``app``, so the service can also
be run on its own, e.g.::

    uvicorn hybrid_api.calculator_svc.main:app --port 8080

Building the app does not touch logging or settings: the launcher
imports this module before it has loaded ``.env``.  Logging is set up by
``entrypoint`` (or ``hybrid_api.launcher.main``) once configuration is
available.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from uvicorn import Config, Server

from hybrid_api.core.config import get_settings
from hybrid_api.core.logging_config import setup_logging
from .api.router import router


logger = logging.getLogger(__name__)


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected malformed body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST.value, content={"error": "Invalid request body"})


def create_app() -> FastAPI:
    """Create the calculator FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI instance serving ``POST /calculator``.
    """
    app = FastAPI(title="Calculator Service", version="1.0.0")
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.include_router(router)
    return app


app = create_app()


async def entrypoint() -> None:
    """Serve the calculator until the server stops.

    Host and port are read from ``CALCULATOR_HOST`` and
    ``CALCULATOR_PORT`` (defaults ``0.0.0.0`` and ``8080``).
    """
    current = get_settings()
    setup_logging(current.log_level, current.log_file)
    host, port = current.calculator_host, current.calculator_port
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logger.info("Starting calculator service on %s:%s", host, port)
    await server.serve()
