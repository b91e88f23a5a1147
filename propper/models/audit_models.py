"""
Audit Request/Response Models — API contract schemas.

These are the public-facing Pydantic models returned by the engine and served
by the /audit endpoint. Field names are camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from propper.models.component_models import ExtractedComponentData

FindingLevel = Literal["error", "warning", "info"]
CheckName = Literal["props", "a11y", "tokens"]
FixType = Literal["ADD_COMPONENT_PROPERTY", "ADD_CODE_ONLY_PROP_LAYER"]


class AuditModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict using wire names, without unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AutoFixData(AuditModel):
    """Mechanical remediation a plugin or script can apply to resolve a finding."""

    fix_type: FixType
    prop_name: str
    prop_type: str | None = None
    default_value: str | bool | None = None
    prop_category: str | None = None
    figma_prop_type: Literal["TEXT", "BOOLEAN", "none"] | None = None


class AuditFinding(AuditModel):
    """A single issue surfaced by the audit."""

    type: FindingLevel
    check: CheckName
    message: str
    auto_fix_data: AutoFixData | None = None


class CheckResult(AuditModel):
    pass_: bool = Field(..., alias="pass")
    total: int = Field(default=0, ge=0)
    passed: int = Field(default=0, ge=0)


class AuditChecks(AuditModel):
    props: CheckResult
    a11y: CheckResult
    tokens: CheckResult


class AuditResult(AuditModel):
    """Full audit result for one component."""

    score: int = Field(..., ge=0, le=100)
    component_type: str
    checks: AuditChecks
    findings: tuple[AuditFinding, ...] = ()

    @property
    def has_errors(self) -> bool:
        return any(f.type == "error" for f in self.findings)


class AuditRequest(BaseModel):
    """Request body for POST /audit."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    component_data: ExtractedComponentData | None = None
    context: dict[str, Any] | None = Field(
        default=None, description="Reserved for framework-specific rule variants"
    )


class AuditEntry(BaseModel):
    """Audit-trail metadata for one /audit call."""

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )
    component_id: str
    component_name: str
    component_type: str
    score: int
    findings: int
    errors: int
    duration_ms: float = 0.0
