from .blocks import split_segments
from .links import LinkFormatter
from .pipeline import Translator, translate
from .resolver import SymbolResolver
from .scanner import InlineScanner

__all__ = [
    "InlineScanner",
    "LinkFormatter",
    "SymbolResolver",
    "Translator",
    "split_segments",
    "translate",
]
