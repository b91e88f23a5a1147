"""Audit report rendering for the terminal, JSON consumers and PR comments."""

from __future__ import annotations

import json

import click

from propper.core.scorer import is_passing
from propper.models.audit_models import AuditResult, CheckResult

RULE = "─" * 50

_LEVEL_LABELS = {
    "error": ("✗ [ERR] ", "red"),
    "warning": ("⚠ [WARN]", "yellow"),
    "info": ("ℹ [INFO]", "blue"),
}
_MARKDOWN_ICONS = {"error": "🔴", "warning": "🟡", "info": "🔵"}


def _score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _check_line(label: str, check: CheckResult, na_when_passing: bool = False) -> str:
    if check.pass_:
        status = click.style("PASS", fg="green")
    elif na_when_passing:
        status = click.style("N/A ", fg="bright_black")
    else:
        status = click.style("FAIL", fg="red")
    return f"    {label:<12}{status}  {check.passed}/{check.total}"


def render_terminal(component_name: str, result: AuditResult, threshold: int = 80) -> str:
    """Render a colorized audit summary."""
    status = (
        click.style("✓ PASS", fg="green", bold=True)
        if is_passing(result, threshold)
        else click.style("✗ FAIL", fg="red", bold=True)
    )
    lines = [
        "",
        click.style("Propper Audit", bold=True) + " — " + click.style(component_name, fg="cyan"),
        RULE,
        "  Score:      "
        + click.style(f"{result.score}%", fg=_score_color(result.score), bold=True)
        + f" ({result.component_type})",
        f"  Status:     {status}",
        "",
        "  Checks:",
        _check_line("Props", result.checks.props),
        _check_line("A11y", result.checks.a11y),
        _check_line("Tokens", result.checks.tokens, na_when_passing=True),
        "",
    ]

    if result.findings:
        lines.append("  Findings:")
        for finding in result.findings:
            label, color = _LEVEL_LABELS[finding.type]
            lines.append(f"    {click.style(label, fg=color)} {finding.message}")
    else:
        lines.append(click.style("  ✓ All checks passed — ready for handoff!", fg="green"))

    lines.append(RULE)
    return "\n".join(lines)


def render_json(component_name: str, result: AuditResult) -> str:
    """Render the result as JSON with the component name attached."""
    return json.dumps({"component": component_name, **result.to_dict()}, indent=2)


def render_markdown(component_name: str, result: AuditResult, threshold: int = 80) -> str:
    """Render a Markdown summary suitable for a pull request comment."""
    checks = result.checks

    def status(check: CheckResult, na: str = "❌ Fail") -> str:
        return "✅ Pass" if check.pass_ else na

    verdict = "✅ PASS" if is_passing(result, threshold) else "❌ FAIL"
    lines = [
        f"## Propper Audit: `{component_name}`",
        "",
        "| Check | Status | Score |",
        "|-------|--------|-------|",
        f"| **Props** | {status(checks.props)} | {checks.props.passed}/{checks.props.total} |",
        f"| **A11y** | {status(checks.a11y)} | {checks.a11y.passed}/{checks.a11y.total} |",
        f"| **Tokens** | {status(checks.tokens, '➖ N/A')} | — |",
        "",
        f"**Overall Score:** {result.score}% — {verdict}",
        "",
    ]

    if result.findings:
        lines.extend(["### Findings", ""])
        for f in result.findings:
            lines.append(f"- {_MARKDOWN_ICONS[f.type]} **[{f.type.upper()}]** {f.message}")

    return "\n".join(lines)
