"""
Diagnostic sinks.

The resolver never logs by itself: it returns diagnostics inside its
Outcome, and the scanner hands them to a sink. The default sink writes
to the `girdoc.format` logger; the collecting sink keeps them in memory
for reports and tests.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from .types import Diagnostic, Severity

logger = logging.getLogger("girdoc.format")


class DiagnosticSink(Protocol):
    def emit(self, diagnostic: Diagnostic) -> None: ...


class LoggingSink:
    """Forwards diagnostics to a standard logger (info → INFO, warning → WARNING)."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def emit(self, diagnostic: Diagnostic) -> None:
        level = logging.WARNING if diagnostic.severity is Severity.WARNING else logging.INFO
        self.log.log(level, diagnostic.render())


class CollectingSink:
    """
    Keeps diagnostics in emission order.
    With `forward` set, every diagnostic is also passed on to that sink.
    """

    def __init__(self, forward: Optional[DiagnosticSink] = None):
        self.items: List[Diagnostic] = []
        self.forward = forward

    def emit(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        if self.forward is not None:
            self.forward.emit(diagnostic)

    def by_severity(self, severity: Severity) -> List[Diagnostic]:
        return [d for d in self.items if d.severity is severity]

    @property
    def warnings(self) -> List[Diagnostic]:
        return self.by_severity(Severity.WARNING)

    @property
    def infos(self) -> List[Diagnostic]:
        return self.by_severity(Severity.INFO)


__all__ = ["DiagnosticSink", "LoggingSink", "CollectingSink"]
