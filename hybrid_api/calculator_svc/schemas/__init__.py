"""
Pydantic schema definitions for calculator payloads.

The same models describe the HTTP wire format and the in‑process
request, so local and remote callers build requests identically.
"""
