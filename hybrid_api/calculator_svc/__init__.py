"""
Calculator service.

A single arithmetic operation exposed over HTTP (``POST /calculator``)
and, through :mod:`hybrid_api.calculator_svc.sdk`, in‑process.  The
launcher starts the HTTP side through :func:`entrypoint`.
"""

from .main import app, entrypoint  # noqa: F401
