"""
Rules Routes — GET /rules and GET /docs

/rules returns the loaded rules dictionary verbatim (camelCase).
/docs returns a hand-written API description plus a per-component summary.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from propper.api.dependencies import get_rules_schema
from propper.models.rule_models import RulesSchema

router = APIRouter()

_AUDIT_ENDPOINT_DOC: dict[str, Any] = {
    "description": "Audit a Figma component against the rules engine",
    "requestBody": {
        "componentData": {
            "id": "string",
            "name": "string (e.g. 'Button/Primary', 'Checkbox/Default', 'Modal/Confirmation')",
            "type": "string (e.g. 'COMPONENT')",
            "componentProperties": (
                "Record<string, { type: 'BOOLEAN'|'VARIANT'|'TEXT', value: boolean|string }>"
            ),
            "codeOnlyPropsFrame": (
                "Array<{ name: string, value: string }> — extracted from _Code Only Props hidden frame"
            ),
        },
        "context": {"framework": "optional string (e.g. 'react-shadcn')"},
    },
    "response": {
        "score": "number (0-100)",
        "componentType": "string",
        "checks": {
            "props": "{ pass: boolean, total: number, passed: number }",
            "a11y": "{ pass: boolean, total: number, passed: number }",
            "tokens": "{ pass: boolean, total: number, passed: number }",
        },
        "findings": (
            "Array<{ type: 'error'|'warning'|'info', check: string, message: string, "
            "autoFixData?: { fixType, propName, ... } }>"
        ),
    },
}


@router.get("/rules")
async def get_rules(rules: RulesSchema = Depends(get_rules_schema)):
    """Return the current rules dictionary."""
    return rules.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/docs")
async def get_docs(rules: RulesSchema = Depends(get_rules_schema)):
    """API documentation and per-component rule summary."""
    component_details = {
        name: {
            "matchPatterns": list(rule.match_patterns),
            "requiredProps": len(rule.required_boolean_props),
            "codeOnlyProps": len(rule.code_only_props),
        }
        for name, rule in rules.components.items()
    }

    return {
        "version": rules.version,
        "sources": list(rules.sources),
        "endpoints": {
            "POST /audit": _AUDIT_ENDPOINT_DOC,
            "GET /rules": {"description": "Returns the current rules.json configuration"},
            "GET /health": {"description": "Liveness check with the loaded rules version"},
        },
        "supportedComponents": list(rules.components),
        "componentDetails": component_details,
    }
