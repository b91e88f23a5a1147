"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from propper.audit.logger import AuditLogger
from propper.core.rules_loader import get_rules
from propper.models.rule_models import RulesSchema


def get_rules_schema() -> RulesSchema:
    """Rules dictionary loaded once at startup."""
    return get_rules()


@lru_cache
def get_audit_logger() -> AuditLogger:
    """Shared audit logger singleton."""
    return AuditLogger()
