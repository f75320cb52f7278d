from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import resolve_config
from .diagnostics import CollectingSink
from .errors import GirdocUserError
from .format import Translator
from .index import load_index
from .jsonic import dumps as jdumps
from .report import build_report
from .version import tool_version

_LOG_FORMAT = "[%(levelname)s] %(message)s"


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """One stderr handler on the package logger; GIRDOC_DEBUG=1 forces debug."""
    if os.environ.get("GIRDOC_DEBUG") or verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    log = logging.getLogger("girdoc")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(_LOG_FORMAT))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="girdoc",
        description="Translate GObject C doc comments into Markdown with intra-doc links",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--index",
            required=True,
            type=Path,
            help="symbol index file (YAML or JSON)",
        )
        sp.add_argument(
            "--config",
            type=Path,
            help="girdoc.yaml (default: ./girdoc.yaml when present)",
        )
        sp.add_argument(
            "--in-type",
            dest="in_type",
            help="type the comment belongs to (only used in diagnostics)",
        )
        sp.add_argument("--verbose", action="store_true", help="debug logging")
        sp.add_argument("--quiet", action="store_true", help="only log errors")

    sp_render = sub.add_parser("render", help="translated text")
    sp_render.add_argument("source", metavar="TEXT|@FILE|-", help="comment text, @file or - for stdin")
    add_common(sp_render)

    sp_report = sub.add_parser("report", help="JSON report: translated text + diagnostics")
    sp_report.add_argument("source", metavar="TEXT|@FILE|-", help="comment text, @file or - for stdin")
    add_common(sp_report)

    sp_lookup = sub.add_parser("lookup", help="translate a single reference, e.g. '#GtkWidget'")
    sp_lookup.add_argument("token", help="reference as written in a comment")
    add_common(sp_lookup)

    return p


def _read_source(arg: str) -> str:
    """
    Comment source:
    - plain string
    - @path/to/file
    - '-' for stdin
    """
    if arg == "-":
        return sys.stdin.read()
    if arg.startswith("@"):
        file_path = Path(arg[1:])
        if not file_path.is_file():
            raise GirdocUserError(f"Source file not found: {file_path}")
        try:
            return file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise GirdocUserError(f"Failed to read source file {file_path}: {e}") from e
    return arg


def _translator(ns: argparse.Namespace, sink=None) -> Translator:
    cfg = resolve_config(Path.cwd(), ns.config)
    index = load_index(ns.index)
    return Translator(index, cfg, sink)


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose, ns.quiet)

    try:
        if ns.cmd == "render":
            text = _read_source(ns.source)
            sys.stdout.write(_translator(ns).translate(text, ns.in_type))
            return 0

        if ns.cmd == "report":
            text = _read_source(ns.source)
            sink = CollectingSink()
            out = _translator(ns, sink).translate(text, ns.in_type)
            report = build_report(out, sink, ns.in_type)
            sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)))
            return 0

        if ns.cmd == "lookup":
            sys.stdout.write(_translator(ns).translate(ns.token, ns.in_type) + "\n")
            return 0

    except GirdocUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
