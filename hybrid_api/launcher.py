"""Launcher running several services as concurrent units of one process.

The services to start are named in the ``TARGET_SERVICES`` environment
variable (comma separated) and resolved against
:data:`hybrid_api.registry.SERVICE_REGISTRY`.  Each one runs in its own
``asyncio`` task; the launcher returns once every task has finished,
which for a server never happens, so in practice the process lives
until it is terminated.

There is no supervision: a service that raises brings the whole process
down.  Configuration may be placed in a ``.env`` file in the working
directory.

Usage:
    TARGET_SERVICES=calculator-svc python run.py
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import sys
import threading
from typing import Iterable, List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from hybrid_api.core.config import get_settings
from hybrid_api.core.errors import ConfigurationError
from hybrid_api.core.logging_config import setup_logging
from hybrid_api.registry import SERVICE_REGISTRY, StartProcedure


logger = logging.getLogger(__name__)


def parse_requested(value: Optional[str]) -> List[str]:
    """Split a comma‑separated unit list, dropping blank entries."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def _start_in_daemon_thread(name: str, start: StartProcedure) -> asyncio.Future[None]:
    """Run a blocking start procedure on a daemon thread.

    Daemon threads are not joined when ``asyncio.run`` shuts down, so a
    unit that never returns does not keep the process alive once a
    sibling has failed or the launcher is interrupted.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[None] = loop.create_future()

    def settle(exc: Optional[BaseException]) -> None:
        if future.done():
            return
        if exc is None:
            future.set_result(None)
        else:
            future.set_exception(exc)

    def target() -> None:
        outcome: Optional[BaseException] = None
        try:
            start()
        except BaseException as exc:  # handed to the awaiting task
            outcome = exc
        try:
            loop.call_soon_threadsafe(settle, outcome)
        except RuntimeError:
            # Event loop already closed: the launcher has returned.
            logger.debug("Service %s returned after the launcher stopped", name)

    threading.Thread(target=target, name=name, daemon=True).start()
    return future


async def _run_unit(name: str, start: StartProcedure) -> None:
    if inspect.iscoroutinefunction(start):
        await start()
    else:
        await _start_in_daemon_thread(name, start)
    logger.info("Service finished: %s", name)


async def launch(requested: Iterable[str], registry: Mapping[str, StartProcedure]) -> List[str]:
    """Start every requested unit found in ``registry`` and wait for all of them.

    Blank names are skipped and unknown names are logged, neither stops
    the others.  ``Starting service`` is logged as each unit is
    scheduled, so log lines follow request order.  Returns the names
    that were scheduled, in request order.  An exception raised by a
    unit propagates to the caller.
    """
    tasks = []
    scheduled: List[str] = []
    for raw_name in requested:
        name = raw_name.strip()
        if not name:
            continue
        start = registry.get(name)
        if start is None:
            logger.warning("No entrypoint found for service: %s", name)
            continue
        logger.info("Starting service: %s", name)
        tasks.append(asyncio.create_task(_run_unit(name, start), name=name))
        scheduled.append(name)

    await asyncio.gather(*tasks)
    logger.info("All services have finished.")
    return scheduled


def run(requested: Iterable[str], registry: Mapping[str, StartProcedure] = SERVICE_REGISTRY) -> List[str]:
    """Blocking wrapper around :func:`launch`."""
    return asyncio.run(launch(requested, registry))


def main() -> None:
    """Process entry point: load configuration and run ``TARGET_SERVICES``."""
    env_loaded = load_dotenv(find_dotenv(usecwd=True))
    try:
        current = get_settings()
    except ConfigurationError as exc:
        setup_logging()
        logger.error("%s", exc)
        sys.exit(1)
    setup_logging(current.log_level, current.log_file)
    if not env_loaded:
        logger.warning(".env file not found or failed to load")

    if not current.target_services:
        logger.error("TARGET_SERVICES environment variable not set")
        sys.exit(1)

    try:
        run(parse_requested(current.target_services), SERVICE_REGISTRY)
    except KeyboardInterrupt:
        pass
