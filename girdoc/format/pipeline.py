from __future__ import annotations

from typing import List, Optional

from ..config.model import FormatCfg
from ..diagnostics import DiagnosticSink
from ..index.model import SymbolIndex
from .blocks import close_fence, code_body, open_fence, split_segments
from .resolver import SymbolResolver
from .scanner import InlineScanner


class Translator:
    """
    Reusable translator bound to one index and one configuration.

    Holds no per-call state: `translate` may be called from several
    threads at once.
    """

    def __init__(
        self,
        index: SymbolIndex,
        config: Optional[FormatCfg] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        self.config = config or FormatCfg()
        self.resolver = SymbolResolver.from_config(index, self.config)
        self.scanner = InlineScanner.from_config(self.resolver, self.config, sink)

    def translate(self, text: str, context: Optional[str] = None) -> str:
        """
        Pipeline:
          1) split at code block boundaries
          2) prose → inline scanner
          3) code → fence header, body (scanned unless disabled), closing fence
          4) concatenate in original order
        """
        blocks_cfg = self.config.code_blocks
        out: List[str] = []
        for seg in split_segments(text, blocks_cfg):
            if seg.kind == "prose":
                out.append(self.scanner.scan(seg.text, context))
                continue
            out.append(open_fence(seg))
            body = code_body(seg)
            if blocks_cfg.scan_contents:
                body = self.scanner.scan(body, context)
            out.append(body)
            out.append(close_fence(seg))
        return "".join(out)


def translate(
    text: str,
    index: SymbolIndex,
    context: Optional[str] = None,
    *,
    config: Optional[FormatCfg] = None,
    sink: Optional[DiagnosticSink] = None,
) -> str:
    """
    Translates one documentation comment.

    Args:
        text: raw comment text
        index: symbol index (read-only)
        context: type the comment is attached to; only used in diagnostics
        config: translation settings, defaults when omitted
        sink: diagnostics receiver, logging by default

    Returns:
        Markdown text with links, inline code and fenced blocks
    """
    return Translator(index, config, sink).translate(text, context)


__all__ = ["Translator", "translate"]
