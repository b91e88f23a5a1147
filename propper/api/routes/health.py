"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from propper.api.dependencies import get_rules_schema
from propper.config import VERSION
from propper.models.rule_models import RulesSchema

router = APIRouter()


@router.get("/health")
async def health(rules: RulesSchema = Depends(get_rules_schema)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "rulesVersion": rules.version,
        "components": len(rules.components),
    }
