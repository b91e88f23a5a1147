"""
Tests for report rendering.
"""

import json

import click

from propper.core.audit_engine import audit_component
from propper.output.report import render_json, render_markdown, render_terminal


def test_terminal_passing_report(complete_button, rules):
    text = click.unstyle(render_terminal("Button/Primary", audit_component(complete_button, None, rules)))
    assert "Propper Audit — Button/Primary" in text
    assert "Score:      100% (Button)" in text
    assert "✓ PASS" in text
    assert "All checks passed" in text
    assert "N/A" not in text


def test_terminal_failing_report(bare_button, rules):
    text = click.unstyle(render_terminal("Button/Primary", audit_component(bare_button, None, rules)))
    assert "✗ FAIL" in text
    assert "FAIL  0/2" in text
    assert '✗ [ERR]  Missing boolean component property: "disabled"' in text


def test_json_report_includes_component(bare_button, rules):
    payload = json.loads(render_json("Button/Primary", audit_component(bare_button, None, rules)))
    assert payload["component"] == "Button/Primary"
    assert payload["componentType"] == "Button"
    assert len(payload["findings"]) == 2


def test_markdown_report(bare_button, rules):
    text = render_markdown("Button/Primary", audit_component(bare_button, None, rules))
    assert text.startswith("## Propper Audit: `Button/Primary`")
    assert "| **Props** | ❌ Fail | 0/2 |" in text
    assert "| **Tokens** | ✅ Pass | — |" in text
    assert "**Overall Score:** 0% — ❌ FAIL" in text
    assert '- 🔴 **[ERROR]** Missing boolean component property: "loading"' in text


def test_markdown_without_findings_has_no_findings_section(complete_button, rules):
    text = render_markdown("Button/Primary", audit_component(complete_button, None, rules))
    assert "### Findings" not in text
    assert "✅ PASS" in text
