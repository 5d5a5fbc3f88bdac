"""
Top‑level router for the calculator service.

When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import calculator

router = APIRouter()

# The calculator router defines its own "/calculator" path.  Do not add
# a prefix here or the endpoint would move away from the SDK's path.
router.include_router(calculator.router, tags=["calculator"])
