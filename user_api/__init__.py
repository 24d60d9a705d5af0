"""User Directory API — user management over HTTP."""

__version__ = "1.0.0"
