from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .diagnostics import CollectingSink
from .types import Severity

PROTOCOL_VERSION = 1


class DiagnosticEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Literal["info", "warning"]
    message: str
    token: str
    context: Optional[str] = None


class DiagnosticCounts(BaseModel):
    info: int = 0
    warning: int = 0


class TranslateReport(BaseModel):
    """JSON answer of `girdoc report`."""
    model_config = ConfigDict(populate_by_name=True)

    protocol: int = PROTOCOL_VERSION
    text: str
    in_type: Optional[str] = Field(default=None, alias="inType")
    diagnostics: List[DiagnosticEntry] = Field(default_factory=list)
    counts: DiagnosticCounts = Field(default_factory=DiagnosticCounts)


def build_report(text: str, sink: CollectingSink, in_type: Optional[str] = None) -> TranslateReport:
    entries = [
        DiagnosticEntry(
            severity=d.severity.value,
            message=d.message,
            token=d.token,
            context=d.context,
        )
        for d in sink.items
    ]
    counts = DiagnosticCounts(
        info=len(sink.by_severity(Severity.INFO)),
        warning=len(sink.by_severity(Severity.WARNING)),
    )
    return TranslateReport(text=text, in_type=in_type, diagnostics=entries, counts=counts)


__all__ = ["PROTOCOL_VERSION", "DiagnosticEntry", "DiagnosticCounts", "TranslateReport", "build_report"]
