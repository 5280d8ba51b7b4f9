from __future__ import annotations

from diagnostics import DEPTH_LIMIT, MALFORMED_ATTRIBUTE, UNSUPPORTED_FEATURE, DiagnosticLog
from errors import MalformedAttributeError


def test_error_and_warning_split():
    log = DiagnosticLog()
    log.unsupported("<text> elements unsupported", "text")
    log.malformed("bad width", "rect", "r1")
    log.add(DEPTH_LIMIT, "too deep")

    assert len(log) == 3
    assert [d.kind for d in log.errors()] == [MALFORMED_ATTRIBUTE, DEPTH_LIMIT]
    assert [d.kind for d in log.warnings()] == [UNSUPPORTED_FEATURE]
    assert str(log.events[1]) == "<rect id=r1> bad width"
    assert str(log.events[2]) == "too deep"


def test_print_report(capsys):
    log = DiagnosticLog()
    log.print_report()
    assert "[OK]" in capsys.readouterr().out

    log.unsupported("<text> elements unsupported", "text")
    log.malformed("bad width", "rect")
    log.print_report()
    out = capsys.readouterr().out
    assert "[ERROR]" in out
    assert "ERROR: <rect> bad width" in out
    assert "WARNING: <text> <text> elements unsupported" in out


def test_malformed_attribute_messages():
    missing = MalformedAttributeError("width", tag="rect")
    assert str(missing) == "missing required attribute 'width'"
    assert missing.tag == "rect"
    invalid = MalformedAttributeError("r", "big", "circle")
    assert str(invalid) == "invalid r value: 'big'"


def test_malformed_diagnostic_names_tag_once():
    log = DiagnosticLog()
    error = MalformedAttributeError("width", "wide", "rect")
    log.malformed(str(error), error.tag)
    assert str(log.events[0]) == "<rect> invalid width value: 'wide'"
