"""
Rules Loader — Reads and validates the rules dictionary.

The schema is loaded once per process through get_rules() and treated as
read-only afterwards. Any defect in the file is fatal at startup.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from propper.config import settings
from propper.models.rule_models import RulesSchema

logger = logging.getLogger("propper.rules")


class RulesLoadError(RuntimeError):
    """The rules dictionary is missing, unparseable or fails validation."""


def parse_rules(raw: dict) -> RulesSchema:
    """Validate an already-decoded rules dictionary."""
    try:
        return RulesSchema.model_validate(raw)
    except ValidationError as e:
        raise RulesLoadError(f"Invalid rules schema: {e}") from e


def load_rules(path: str | Path) -> RulesSchema:
    """Load and validate the rules dictionary at ``path``."""
    rules_path = Path(path)
    try:
        raw = json.loads(rules_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RulesLoadError(f"Cannot read rules file {rules_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RulesLoadError(f"Rules file {rules_path} is not valid JSON: {e}") from e

    rules = parse_rules(raw)
    logger.info(
        f"Loaded rules v{rules.version} from {rules_path} "
        f"({len(rules.components)} component types)"
    )
    return rules


@lru_cache
def get_rules() -> RulesSchema:
    """Process-wide rules singleton."""
    return load_rules(settings.rules_path)
