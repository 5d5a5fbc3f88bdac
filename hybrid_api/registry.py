"""
Registry of services the launcher can start.

Maps a unit name, as written in ``TARGET_SERVICES``, to its zero‑argument
start procedure.  The mapping is read‑only; adding a service means adding
one entry here.
"""

from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Union

from hybrid_api import calculator_svc


StartProcedure = Callable[[], Union[Awaitable[Any], Any]]

SERVICE_REGISTRY: Mapping[str, StartProcedure] = MappingProxyType(
    {
        "calculator-svc": calculator_svc.entrypoint,
    }
)
