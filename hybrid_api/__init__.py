"""
Top‑level package for the hybrid services host.

The package bundles a small launcher that starts named services as
concurrent units of a single process (``hybrid_api.launcher``) and the
services themselves.  Each service lives in its own subpackage (for
example ``calculator_svc``) and exposes a zero‑argument ``entrypoint``
which the launcher registry refers to by name.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
