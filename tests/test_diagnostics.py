import logging

from girdoc import translate
from girdoc.diagnostics import CollectingSink, LoggingSink
from girdoc.report import PROTOCOL_VERSION, build_report
from girdoc.types import Diagnostic, Severity


def _diag(severity, token="X", context=None):
    return Diagnostic(severity, f"`{token}` was not found", token, context)


def test_collecting_sink_keeps_order_and_forwards():
    inner = CollectingSink()
    sink = CollectingSink(forward=inner)
    items = [_diag(Severity.INFO, "a"), _diag(Severity.WARNING, "b"), _diag(Severity.INFO, "c")]
    for d in items:
        sink.emit(d)
    assert sink.items == items
    assert inner.items == items
    assert [d.token for d in sink.infos] == ["a", "c"]
    assert [d.token for d in sink.warnings] == ["b"]


def test_logging_sink_levels(caplog):
    caplog.set_level(logging.INFO, logger="girdoc.format")
    sink = LoggingSink()
    sink.emit(_diag(Severity.INFO, "a"))
    sink.emit(_diag(Severity.WARNING, "b", context="GtkWidget"))
    records = [r for r in caplog.records if r.name == "girdoc.format"]
    assert [r.levelno for r in records] == [logging.INFO, logging.WARNING]
    assert records[1].getMessage() == "`b` was not found (in `GtkWidget`)"


def test_translation_logs_through_default_sink(index, caplog):
    caplog.set_level(logging.WARNING, logger="girdoc.format")
    assert translate("%NOPE", index) == "`NOPE`"
    assert any("NOPE" in r.getMessage() for r in caplog.records)


class TestReport:

    def test_counts_and_entries(self):
        sink = CollectingSink()
        sink.emit(_diag(Severity.INFO, "f", "GtkLabel"))
        sink.emit(_diag(Severity.WARNING, "f", "GtkLabel"))
        report = build_report("out", sink, "GtkLabel")
        assert report.protocol == PROTOCOL_VERSION
        assert report.counts.info == 1 and report.counts.warning == 1
        assert [e.severity for e in report.diagnostics] == ["info", "warning"]
        assert report.diagnostics[0].context == "GtkLabel"

    def test_json_uses_alias(self):
        data = build_report("out", CollectingSink(), "GtkLabel").model_dump(mode="json", by_alias=True)
        assert data["inType"] == "GtkLabel"
        assert data["diagnostics"] == []
        assert data["counts"] == {"info": 0, "warning": 0}
