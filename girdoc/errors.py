"""
Base exceptions for user-facing errors.

Expected errors that should be shown to the user as a clean message
(without a stack trace) inherit from GirdocUserError: broken config files,
malformed index files, unreadable inputs.

Translation itself never raises these: an incomplete index degrades to
inline code plus diagnostics. Programming errors are not wrapped and
propagate with full tracebacks.
"""

from __future__ import annotations


class GirdocUserError(Exception):
    """
    Base class for all user-facing errors in girdoc.
    """
    pass


class ConfigLoadError(GirdocUserError, ValueError):
    """Invalid configuration; message starts with the dotted key path."""
    pass


class IndexLoadError(GirdocUserError):
    """Missing or malformed symbol index file."""
    pass


__all__ = ["GirdocUserError", "ConfigLoadError", "IndexLoadError"]
