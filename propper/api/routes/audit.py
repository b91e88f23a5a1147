"""
Audit Route — POST /audit

Accepts {"componentData": {...}, "context": {...}}, runs the rules engine and
returns the AuditResult. Every call is appended to the audit trail.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from propper.api.dependencies import get_audit_logger, get_rules_schema
from propper.audit.logger import AuditLogger
from propper.core.audit_engine import audit_component
from propper.models.audit_models import AuditEntry, AuditRequest, AuditResult
from propper.models.rule_models import RulesSchema

logger = logging.getLogger("propper.api.audit")

router = APIRouter()

INVALID_PAYLOAD = "Invalid payload: componentData with name is required"


@router.post("/audit", response_model=AuditResult, response_model_exclude_none=True)
def audit(
    request: AuditRequest,
    rules: RulesSchema = Depends(get_rules_schema),
    audit_log: AuditLogger = Depends(get_audit_logger),
):
    """Audit a Figma component against the rules dictionary."""
    component = request.component_data
    if component is None or not component.name:
        raise HTTPException(status_code=400, detail=INVALID_PAYLOAD)

    start = time.monotonic()
    result = audit_component(component, request.context, rules)
    elapsed = (time.monotonic() - start) * 1000

    logger.info(
        f"Audited {component.name!r} → {result.component_type} "
        f"score={result.score} findings={len(result.findings)}"
    )

    audit_log.log(
        AuditEntry(
            component_id=component.id,
            component_name=component.name,
            component_type=result.component_type,
            score=result.score,
            findings=len(result.findings),
            errors=sum(1 for f in result.findings if f.type == "error"),
            duration_ms=round(elapsed, 2),
        )
    )

    return result
