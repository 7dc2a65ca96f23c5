"""Small helpers for conditions, optional values, strings, collections and in-memory logging."""

__version__ = "0.2.0"
__all__ = ["conditions", "helpers", "logger", "options", "strings"]