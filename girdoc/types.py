from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Tuple


# ---- Diagnostics ----

class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single resolution diagnostic.

    `token` is the raw token text as found in the comment, `context`
    the type the comment belongs to (for messages only).
    """
    severity: Severity
    message: str
    token: str
    context: Optional[str] = None

    def render(self) -> str:
        if self.context:
            return f"{self.message} (in `{self.context}`)"
        return self.message


# ---- Resolution outcome ----

@dataclass(frozen=True)
class Outcome:
    """
    Result of resolving one token: either a ready link, or the original
    token text which is rendered back as inline code.
    """
    link: Optional[str]
    text: str
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def resolved(self) -> bool:
        return self.link is not None

    def render(self) -> str:
        if self.link is not None:
            return self.link
        return f"`{self.text}`"

    @staticmethod
    def hit(link: str, text: str, *diagnostics: Diagnostic) -> Outcome:
        return Outcome(link=link, text=text, diagnostics=tuple(diagnostics))

    @staticmethod
    def miss(text: str, *diagnostics: Diagnostic) -> Outcome:
        return Outcome(link=None, text=text, diagnostics=tuple(diagnostics))


# ---- Tokens ----

Sigil = Literal["#", "%", "@", ""]
TokenKind = Literal["function", "symbol", "bare"]


@dataclass(frozen=True)
class Token:
    """
    One inline reference found by the scanner.

    Attributes:
        kind: which grammar matched
        sigil: '#', '%', '@' or '' when none was written
        scope: qualifying prefix without separators ('GtkWidget' in 'GtkWidget.show()')
        body: the identifier itself
        suffix: trailing member as written ('.show' in '#GtkWidget.show')
        raw: the exact matched text
    """
    kind: TokenKind
    sigil: Sigil
    body: str
    raw: str
    scope: Optional[str] = None
    suffix: Optional[str] = None


# ---- Segments ----

SegmentKind = Literal["prose", "code"]


@dataclass
class Segment:
    """
    Part of a comment split at code-block boundaries.

    For code segments `language` is the normalized fence tag and
    `terminated` tells whether a closing marker was found.
    """
    kind: SegmentKind
    text: str
    language: Optional[str] = None
    terminated: bool = True


__all__ = ["Severity", "Diagnostic", "Outcome", "Sigil", "TokenKind", "Token", "SegmentKind", "Segment"]
