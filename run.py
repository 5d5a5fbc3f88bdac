"""Unified entry point for the hybrid services host.

Starts every service named in ``TARGET_SERVICES`` as a concurrent unit
of this process.  It is intended to be executed from the project root,
for example under Docker, where you only specify a single Python file
to run.  See :mod:`hybrid_api.launcher` for details.

Usage:
    TARGET_SERVICES=calculator-svc python run.py
"""

from hybrid_api.launcher import main


if __name__ == "__main__":
    main()
