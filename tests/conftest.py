from pathlib import Path

import pytest

from girdoc.config import FormatCfg
from girdoc.diagnostics import CollectingSink
from girdoc.format import InlineScanner, SymbolResolver, Translator

from tests.infrastructure import SAMPLE_INDEX_YAML, make_sample_index, write


@pytest.fixture
def index():
    return make_sample_index()


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def resolver(index) -> SymbolResolver:
    return SymbolResolver.from_config(index, FormatCfg())


@pytest.fixture
def scanner(resolver, sink) -> InlineScanner:
    return InlineScanner.from_config(resolver, FormatCfg(), sink)


@pytest.fixture
def translator(index, sink) -> Translator:
    return Translator(index, FormatCfg(), sink)


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Project dir with index.yaml and a doc comment in doc.txt."""
    write(tmp_path / "index.yaml", SAMPLE_INDEX_YAML)
    write(tmp_path / "doc.txt", "Calls gtk_widget_show() on @widget.\n")
    return tmp_path
