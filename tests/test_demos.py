"""Tests for the demo runner and the full program output."""
import io

from patterns.demos import (
    DEMOS,
    capture,
    run_all,
    run_bridge_demo,
    run_factory_method_demo,
    run_template_method_demo,
)


def test_factory_method_demo():
    assert capture(run_factory_method_demo) == ["Preparing a coffee.", "Preparing a tea."]


def test_bridge_demo():
    assert capture(run_bridge_demo) == [
        "Preparing a refined coffee.",
        "Adding milk.",
        "Preparing a refined tea.",
        "Adding sugar.",
    ]


def test_template_method_demo():
    lines = capture(run_template_method_demo)
    assert len(lines) == 8
    assert lines[:4] == ["Boiling water.", "Brewing coffee.", "Pouring into cup.", "Adding sugar and milk."]


def test_run_all_output(capsys, program_output):
    run_all()
    assert capsys.readouterr().out == program_output


def test_run_all_is_deterministic():
    first, second = io.StringIO(), io.StringIO()
    run_all(first)
    run_all(second)
    assert first.getvalue() == second.getvalue()


def test_demo_registry_order():
    assert list(DEMOS) == ["factory-method", "bridge", "template-method"]
    assert [demo.title for demo in DEMOS.values()] == ["Factory Method", "Bridge", "Template Method"]
    assert DEMOS["bridge"].run is run_bridge_demo


def test_capture_keeps_blank_header_separator():
    lines = capture(run_all)
    assert lines[0] == "1. Factory Method"
    assert lines[3:5] == ["", "2. Bridge"]
    assert lines.count("") == 2
