"""
Audit Engine — Scores a component's code-readiness against the rules dictionary.

Pure and synchronous: no I/O, no shared state, inputs are never mutated.
Safe to call concurrently for independent components.
"""

from __future__ import annotations

import logging
from typing import Any

from propper.core.evaluators import (
    check_a11y_props,
    check_boolean_props,
    check_code_only_props,
    check_tokens,
)
from propper.core.matcher import identify_component
from propper.core.normalizer import documented_code_props, normalize_props
from propper.core.scorer import calculate_score
from propper.models.audit_models import AuditChecks, AuditFinding, AuditResult, CheckResult
from propper.models.component_models import ExtractedComponentData
from propper.models.rule_models import RulesSchema

logger = logging.getLogger("propper.engine")

UNKNOWN_COMPONENT = "unknown"


def _unmatched_result(name: str, rules: RulesSchema) -> AuditResult:
    known = ", ".join(rules.components)
    return AuditResult(
        score=0,
        component_type=UNKNOWN_COMPONENT,
        checks=AuditChecks(
            props=CheckResult(pass_=False),
            a11y=CheckResult(pass_=False),
            tokens=CheckResult(pass_=True),
        ),
        findings=(
            AuditFinding(
                type="error",
                check="props",
                message=f'Component "{name}" does not match any known component type ({known}).',
            ),
        ),
    )


def audit_component(
    component_data: ExtractedComponentData,
    context: Any,
    rules: RulesSchema,
) -> AuditResult:
    """
    Run the rules audit against one extracted component.

    Args:
        component_data: Snapshot produced by the extraction side. ``name``
            must be non-empty; callers reject anything else beforehand.
        context: Reserved for framework-specific rule variants. Not inspected.
        rules: Loaded rules dictionary.

    Returns:
        AuditResult. Unmatched names yield score 0 and a single error finding.
    """
    component_type = identify_component(component_data.name, rules)
    if component_type is None:
        logger.debug(f"No component type matches {component_data.name!r}")
        return _unmatched_result(component_data.name, rules)

    rule = rules.components[component_type]
    declared = normalize_props(component_data.component_properties)
    documented = documented_code_props(component_data.code_only_props_frame)

    boolean = check_boolean_props(rule.required_boolean_props, declared)
    a11y = check_a11y_props(rule.code_only_props, documented)
    code_only = check_code_only_props(rule.code_only_props, documented)
    tokens = check_tokens()

    props_total = boolean.total + code_only.total
    props_passed = boolean.passed + code_only.passed
    # a11y errors gate only the a11y check, never props
    props_errors = boolean.error_count + code_only.error_count

    score = calculate_score(
        props_passed + a11y.passed + tokens.passed,
        props_total + a11y.total + tokens.total,
    )

    logger.debug(
        f"Audited {component_data.name!r} as {component_type}: score={score} "
        f"props={props_passed}/{props_total} a11y={a11y.passed}/{a11y.total}"
    )

    return AuditResult(
        score=score,
        component_type=component_type,
        checks=AuditChecks(
            props=CheckResult(pass_=props_errors == 0, total=props_total, passed=props_passed),
            a11y=CheckResult(pass_=a11y.passed == a11y.total, total=a11y.total, passed=a11y.passed),
            tokens=CheckResult(pass_=True, total=tokens.total, passed=tokens.passed),
        ),
        findings=boolean.findings + a11y.findings + code_only.findings + tokens.findings,
    )
