"""
Service layer for the calculator.

Business logic lives here so that the HTTP endpoint and the in‑process
SDK variant share exactly one implementation.
"""
