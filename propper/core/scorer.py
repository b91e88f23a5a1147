"""
Propper — Readiness score calculator.
"""

from __future__ import annotations

import math

from propper.models.audit_models import AuditResult


def calculate_score(passed: int, total: int) -> int:
    """Compute a 0-100 readiness score from passed/total check counts.

    No checks configured → 100 (vacuously ready).
    Halves round up: 1 of 8 passed → 13.
    """
    if total <= 0:
        return 100
    return int(math.floor(passed / total * 100 + 0.5))


def is_passing(result: AuditResult, threshold: int = 80) -> bool:
    """Display verdict used by reports and the CLI, not by the engine."""
    return result.score >= threshold and not result.has_errors
