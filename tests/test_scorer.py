"""
Tests for the readiness score and the display verdict.
"""

from propper.core.scorer import calculate_score, is_passing
from propper.models.audit_models import AuditChecks, AuditFinding, AuditResult, CheckResult


def _result(score, *levels):
    ok = CheckResult(pass_=True)
    return AuditResult(
        score=score,
        component_type="Button",
        checks=AuditChecks(props=ok, a11y=ok, tokens=ok),
        findings=tuple(AuditFinding(type=lvl, check="props", message="x") for lvl in levels),
    )


def test_no_checks_is_perfect():
    assert calculate_score(0, 0) == 100


def test_bounds():
    assert calculate_score(0, 5) == 0
    assert calculate_score(5, 5) == 100


def test_rounds_half_up():
    assert calculate_score(1, 2) == 50
    assert calculate_score(1, 8) == 13
    assert calculate_score(3, 8) == 38
    assert calculate_score(2, 3) == 67
    assert calculate_score(1, 3) == 33


def test_is_passing_needs_threshold_and_no_errors():
    assert is_passing(_result(80))
    assert is_passing(_result(95, "warning", "info"))
    assert not is_passing(_result(79))
    assert not is_passing(_result(100, "error"))
    assert is_passing(_result(60), threshold=50)
