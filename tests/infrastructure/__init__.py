"""
Shared test infrastructure for girdoc.

Modules:
- file_utils: writing files in temporary projects
- index_builders: sample symbol indexes (objects, records, enums, flags)
- cli_utils: running the CLI in a subprocess
"""

from .cli_utils import jload, run_cli
from .file_utils import write
from .index_builders import SAMPLE_INDEX_YAML, make_sample_index, make_scenario_index

__all__ = [
    "write",
    "run_cli",
    "jload",
    "SAMPLE_INDEX_YAML",
    "make_sample_index",
    "make_scenario_index",
]
