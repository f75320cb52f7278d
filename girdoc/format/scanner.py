"""
Inline reference scanner.

Passes over a prose segment, in this order:
  1. function references      `gtk_widget_show()`, `GtkWidget.show()`
  2. sigil references          `#GtkWidget`, `#GtkWidget.show`, `%GTK_ALIGN_FILL`
  3. prefixed bare identifiers `` `GtkWidget` ``
  4. html-like tags            `<child>` → inline code
  5. space collapsing
  6. parameters                `@widget` → inline code (last: `@` is also a
                               valid function sigil)
"""

from __future__ import annotations

import dataclasses
import re
from typing import Callable, Iterable, List, Optional, Pattern, Tuple

from ..config.model import DEFAULT_BARE_TYPE_PREFIXES, FormatCfg
from ..diagnostics import DiagnosticSink, LoggingSink
from ..types import Outcome, Token
from .resolver import SymbolResolver

FUNCTION = re.compile(r"([@#%])?(\w+\b[:.]+)?(\b[a-z0-9_]+)\(\)")
SYMBOL = re.compile(r"([#%])(\w+\b)([:.]+[\w-]+\b)?")
PARAM_SYMBOL = re.compile(r"@(\w+\b)([:.]+[\w-]+\b)?")
TAGS = re.compile(r"<[\w/-]+>")
SPACES = re.compile(r"[ ]{2,}")

_SEPARATORS = ":."


def bare_type_pattern(prefixes: Iterable[str]) -> Optional[Pattern[str]]:
    """
    Inline code spans holding a prefixed type name: `GtkWidget`, `PangoLayout.`.
    One leading character other than '(' or ':' is tolerated (and dropped),
    as is a trailing dot.
    """
    prefixes = [p for p in prefixes if p]
    if not prefixes:
        return None
    alt = "|".join(re.escape(p) for p in prefixes)
    return re.compile(rf"`([^(:`])?((?:{alt})\w+\b)(\.)?`")


def _strip_separators(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    return s.strip(_SEPARATORS) or None


Span = Tuple[int, int]


def _sub_with_spans(pattern: Pattern[str], text: str, repl: Callable[[re.Match], str]) -> Tuple[str, List[Span]]:
    """Like `pattern.sub`, but also returns where each replacement landed in the result."""
    parts: List[str] = []
    spans: List[Span] = []
    pos = size = 0
    for m in pattern.finditer(text):
        parts.append(text[pos:m.start()])
        size += m.start() - pos
        r = repl(m)
        parts.append(r)
        spans.append((size, size + len(r)))
        size += len(r)
        pos = m.end()
    parts.append(text[pos:])
    return "".join(parts), spans


def _overlaps(m: re.Match, spans: List[Span]) -> bool:
    return any(start < m.end() and m.start() < end for start, end in spans)


class InlineScanner:
    """
    Replaces inline references in prose with links or inline code.

    Diagnostics produced while resolving go to `sink`; they never change
    the returned text.
    """

    def __init__(
        self,
        resolver: SymbolResolver,
        *,
        bare_type_prefixes: Iterable[str] = DEFAULT_BARE_TYPE_PREFIXES,
        sink: Optional[DiagnosticSink] = None,
    ):
        self.resolver = resolver
        self.sink: DiagnosticSink = sink or LoggingSink()
        self._bare = bare_type_pattern(bare_type_prefixes)

    @classmethod
    def from_config(
        cls,
        resolver: SymbolResolver,
        cfg: FormatCfg,
        sink: Optional[DiagnosticSink] = None,
    ) -> InlineScanner:
        return cls(resolver, bare_type_prefixes=cfg.bare_type_prefixes, sink=sink)

    # ------------------------------------------------------------------ #

    def scan(self, text: str, context: Optional[str] = None) -> str:
        out = FUNCTION.sub(lambda m: self._render(self._function_token(m), context), text)
        out, produced = _sub_with_spans(SYMBOL, out, lambda m: self._render(self._symbol_token(m), context))
        if self._bare is not None:
            # spans written by the sigil pass are already resolved
            out = self._bare.sub(
                lambda m: m.group(0) if _overlaps(m, produced) else self._render(self._bare_token(m), context),
                out,
            )
        out = TAGS.sub(r"`\g<0>`", out)
        out = SPACES.sub(" ", out)
        return PARAM_SYMBOL.sub(lambda m: f"`{m.group(1)}`", out)

    # --- tokens ------------------------------------------------------------

    @staticmethod
    def _function_token(m: re.Match) -> Token:
        return Token(
            kind="function",
            sigil=m.group(1) or "",
            scope=_strip_separators(m.group(2)),
            body=m.group(3),
            raw=m.group(0),
        )

    @staticmethod
    def _symbol_token(m: re.Match) -> Token:
        return Token(
            kind="symbol",
            sigil=m.group(1),
            body=m.group(2),
            suffix=m.group(3),
            raw=m.group(0),
        )

    @staticmethod
    def _bare_token(m: re.Match) -> Token:
        return Token(kind="bare", sigil="", body=m.group(2), raw=m.group(0))

    # --- resolution ----------------------------------------------------------

    def resolve(self, token: Token) -> tuple[str, Outcome]:
        """
        Resolves one token; returns the replacement text and the outcome.
        """
        r = self.resolver
        if token.kind == "function":
            outcome = r.resolve_function(token.body, token.scope)
            return outcome.render(), outcome

        if token.kind == "bare":
            outcome = r.resolve_type(token.body)
            return outcome.render(), outcome

        suffix = token.suffix or ""
        literal = r.links.literal_link(token.body)
        if literal is not None:
            return literal + suffix, Outcome.hit(literal, token.body)

        text = token.body + suffix
        if token.sigil == "%":
            outcome = r.resolve_constant_or_member(token.body, text=text)
            if outcome.resolved:
                return outcome.render() + suffix, outcome
            return outcome.render(), outcome

        outcome = r.resolve_type_or_method(token.body, _strip_separators(token.suffix), text=text)
        return outcome.render(), outcome

    def _render(self, token: Token, context: Optional[str]) -> str:
        replacement, outcome = self.resolve(token)
        for diag in outcome.diagnostics:
            self.sink.emit(dataclasses.replace(diag, context=context) if context else diag)
        return replacement


__all__ = [
    "FUNCTION",
    "SYMBOL",
    "PARAM_SYMBOL",
    "TAGS",
    "SPACES",
    "bare_type_pattern",
    "InlineScanner",
]
