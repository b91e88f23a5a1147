"""
Check Evaluators — One pass per check category.

Every component type shares these evaluators; types differ only by the
ComponentRule data passed in. Each evaluator preserves rule order in the
findings it emits.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from propper.models.audit_models import AuditFinding, AutoFixData, CheckName
from propper.models.rule_models import BooleanPropRule, CodeOnlyPropRule


@dataclass(frozen=True)
class CheckOutcome:
    """Counts and findings produced by a single evaluator."""

    total: int = 0
    passed: int = 0
    findings: tuple[AuditFinding, ...] = field(default_factory=tuple)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.type == "error")


def _with_description(message: str, description: str | None) -> str:
    return f"{message} — {description}" if description else message


def check_boolean_props(
    rules: Iterable[BooleanPropRule],
    declared: frozenset[str],
) -> CheckOutcome:
    """Required native boolean properties, matched against normalized keys."""
    total = 0
    passed = 0
    findings: list[AuditFinding] = []

    for rule in rules:
        total += 1
        if rule.name.lower() in declared:
            passed += 1
            continue
        findings.append(
            AuditFinding(
                type=rule.level,
                check="props",
                message=_with_description(
                    f'Missing boolean component property: "{rule.name}"',
                    rule.description,
                ),
                auto_fix_data=AutoFixData(
                    fix_type="ADD_COMPONENT_PROPERTY",
                    prop_name=rule.name,
                    prop_type="BOOLEAN",
                    default_value=False,
                ),
            )
        )

    return CheckOutcome(total=total, passed=passed, findings=tuple(findings))


def _code_only_finding(rule: CodeOnlyPropRule, check: CheckName, message: str) -> AuditFinding:
    return AuditFinding(
        type=rule.level,
        check=check,
        message=_with_description(message, rule.description),
        auto_fix_data=AutoFixData(
            fix_type="ADD_CODE_ONLY_PROP_LAYER",
            prop_name=rule.name,
            prop_category=rule.category,
            default_value=rule.default_value or "",
            figma_prop_type=rule.figma_prop_type,
        ),
    )


def check_a11y_props(
    rules: Iterable[CodeOnlyPropRule],
    documented: frozenset[str],
) -> CheckOutcome:
    """Accessibility code-only props, matched against the documentation frame."""
    total = 0
    passed = 0
    findings: list[AuditFinding] = []

    for rule in rules:
        if rule.category != "a11y":
            continue
        total += 1
        if rule.name.lower() in documented:
            passed += 1
            continue
        findings.append(
            _code_only_finding(rule, "a11y", f'Missing a11y code-only prop: "{rule.name}"')
        )

    return CheckOutcome(total=total, passed=passed, findings=tuple(findings))


def check_code_only_props(
    rules: Iterable[CodeOnlyPropRule],
    documented: frozenset[str],
) -> CheckOutcome:
    """Event, tech and config code-only props. These count toward the props check."""
    total = 0
    passed = 0
    findings: list[AuditFinding] = []

    for rule in rules:
        if rule.category == "a11y":
            continue
        total += 1
        if rule.name.lower() in documented:
            passed += 1
            continue
        findings.append(
            _code_only_finding(
                rule, "props", f'Missing code-only prop: "{rule.name}" ({rule.category})'
            )
        )

    return CheckOutcome(total=total, passed=passed, findings=tuple(findings))


def check_tokens() -> CheckOutcome:
    # Token validation is not implemented yet; the category is kept so the
    # result shape stays stable.
    return CheckOutcome()
