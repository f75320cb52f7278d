"""
Code blocks: `|[<!-- language="C" --> ... ]|` → Markdown fences.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..config.model import CodeBlockCfg
from ..types import Segment

BLOCK_BEGIN = "|["
# `]|` closes a block only after a newline or a blank (or right at its start);
# a preceding newline belongs to the marker
BLOCK_END = re.compile(r"(?:\n|^|(?<=[ \t]))\]\|")
LANGUAGE = re.compile(r'[ \t]*<!--\s*language="([^"]*)"\s*-->')

FENCE = "```"


def take_language(rest: str) -> Tuple[Optional[str], str]:
    """
    Language declaration right after the open marker.
    Returns (language or None, text after the declaration).
    """
    m = LANGUAGE.match(rest)
    if m is None:
        return None, rest
    return m.group(1), rest[m.end():]


def split_segments(text: str, cfg: Optional[CodeBlockCfg] = None) -> List[Segment]:
    """
    Splits a comment into prose and code segments in one left-to-right pass.

    An open marker without a close marker yields an unterminated code
    segment with an empty body; everything after its header is treated
    as prose again (and may open further blocks).
    """
    cfg = cfg or CodeBlockCfg()
    segments: List[Segment] = []
    rest = text
    while True:
        pos = rest.find(BLOCK_BEGIN)
        if pos < 0:
            if rest:
                segments.append(Segment(kind="prose", text=rest))
            return segments
        if pos > 0:
            segments.append(Segment(kind="prose", text=rest[:pos]))

        raw_lang, after = take_language(rest[pos + len(BLOCK_BEGIN):])
        language = cfg.normalize_language(raw_lang)

        end = BLOCK_END.search(after)
        if end is None:
            # TODO: report unterminated blocks through the diagnostic sink once a severity is agreed on
            segments.append(Segment(kind="code", text="", language=language, terminated=False))
            # keep the trailing text off the fence line
            rest = after if not after or after.startswith("\n") else "\n" + after
            continue
        segments.append(Segment(kind="code", text=after[:end.start()], language=language))
        rest = after[end.end():]


def open_fence(segment: Segment) -> str:
    return f"\n{FENCE}{segment.language or ''}"


def close_fence(segment: Segment) -> str:
    return f"\n{FENCE}" if segment.terminated else ""


def code_body(segment: Segment) -> str:
    """Block body, starting on its own line below the fence."""
    body = segment.text
    if body and not body.startswith("\n"):
        return "\n" + body
    return body


__all__ = [
    "BLOCK_BEGIN",
    "BLOCK_END",
    "LANGUAGE",
    "take_language",
    "split_segments",
    "open_fence",
    "close_fence",
    "code_body",
]
