"""
Shared infrastructure used by the launcher and every service:
configuration, logging setup and the error taxonomy.
"""
