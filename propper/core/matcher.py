"""
Component Matcher — Maps a Figma layer name to a configured component type.
"""

from __future__ import annotations

import re
from functools import lru_cache

from propper.models.rule_models import RulesSchema


@lru_cache(maxsize=512)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def identify_component(name: str, rules: RulesSchema) -> str | None:
    """
    Return the first component type whose pattern matches ``name``.

    Types are tried in schema order and patterns in declared order, so
    "IconButton" should be declared before "Button" if it needs to win.
    Patterns are searched, not full-matched: "Primary/Button" and
    "button_cta" both hit a "button" pattern.
    """
    for component_type, rule in rules.components.items():
        for pattern in rule.match_patterns:
            if _compile(pattern).search(name):
                return component_type
    return None
