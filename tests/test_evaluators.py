"""
Tests for Check Evaluators — each pass in isolation.
"""

from propper.core.evaluators import (
    check_a11y_props,
    check_boolean_props,
    check_code_only_props,
    check_tokens,
)
from propper.models.rule_models import BooleanPropRule, CodeOnlyPropRule


def _code_prop(name, category, level="error", **extra):
    return CodeOnlyPropRule(name=name, category=category, level=level, **extra)


def test_boolean_props_counts_and_levels():
    rules = [
        BooleanPropRule(name="disabled", level="error"),
        BooleanPropRule(name="loading", level="warning", description="Async state"),
        BooleanPropRule(name="hasIcon", level="info"),
    ]
    outcome = check_boolean_props(rules, frozenset({"hasicon"}))
    assert outcome.total == 3
    assert outcome.passed == 1
    assert [f.type for f in outcome.findings] == ["error", "warning"]
    assert outcome.findings[1].message == (
        'Missing boolean component property: "loading" — Async state'
    )
    assert outcome.error_count == 1


def test_a11y_pass_ignores_other_categories():
    rules = [
        _code_prop("onClick", "event"),
        _code_prop("aria-label", "a11y", figma_prop_type="TEXT"),
        _code_prop("role", "a11y", level="info", default_value="button"),
    ]
    outcome = check_a11y_props(rules, frozenset({"role"}))
    assert outcome.total == 2
    assert outcome.passed == 1
    assert len(outcome.findings) == 1
    finding = outcome.findings[0]
    assert finding.check == "a11y"
    assert finding.message == 'Missing a11y code-only prop: "aria-label"'


def test_code_only_pass_skips_a11y():
    rules = [
        _code_prop("onClick", "event"),
        _code_prop("aria-label", "a11y"),
        _code_prop("ref", "tech", level="info", description="Forwarded ref"),
        _code_prop("type", "config", level="warning", default_value="button", figma_prop_type="TEXT"),
    ]
    outcome = check_code_only_props(rules, frozenset({"onclick"}))
    assert outcome.total == 3
    assert outcome.passed == 1
    assert [f.message for f in outcome.findings] == [
        'Missing code-only prop: "ref" (tech) — Forwarded ref',
        'Missing code-only prop: "type" (config)',
    ]
    assert all(f.check == "props" for f in outcome.findings)
    fix = outcome.findings[1].auto_fix_data
    assert fix.default_value == "button"
    assert fix.figma_prop_type == "TEXT"
    assert fix.prop_category == "config"


def test_token_check_is_an_empty_pass():
    outcome = check_tokens()
    assert outcome.total == 0
    assert outcome.passed == 0
    assert outcome.findings == ()
