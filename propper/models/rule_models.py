"""
Rules Dictionary Models — Component rules and the versioned schema that holds them.

The schema is loaded once per process and never mutated afterwards, so every
model here is frozen.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RequirementLevel(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


CodeOnlyCategory = Literal["event", "a11y", "tech", "config"]
FigmaPropType = Literal["TEXT", "BOOLEAN", "none"]


class RulesModel(BaseModel):
    """Base for rules models: camelCase on the wire, immutable in memory."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )


class BooleanPropRule(RulesModel):
    """A native boolean component property the component must declare."""

    name: str = Field(..., min_length=1)
    type: Literal["BOOLEAN"] = "BOOLEAN"
    level: RequirementLevel
    description: str | None = None


class CodeOnlyPropRule(RulesModel):
    """A code-only property that must be documented in the annotation frame."""

    name: str = Field(..., min_length=1)
    category: CodeOnlyCategory
    figma_prop_type: FigmaPropType = Field(
        default="none",
        description="Native property type to create alongside the documentation entry",
    )
    level: RequirementLevel
    default_value: str | None = None
    options: tuple[str, ...] | None = None
    description: str | None = None


class ComponentRule(RulesModel):
    """Match patterns and required properties for one component type."""

    match_patterns: tuple[str, ...] = Field(..., min_length=1)
    required_boolean_props: tuple[BooleanPropRule, ...] = ()
    code_only_props: tuple[CodeOnlyPropRule, ...] = ()

    @field_validator("match_patterns")
    @classmethod
    def _patterns_compile(cls, patterns: tuple[str, ...]) -> tuple[str, ...]:
        for pattern in patterns:
            try:
                re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise ValueError(f"invalid match pattern {pattern!r}: {e}") from e
        return patterns


class RulesSchema(RulesModel):
    """Versioned rules dictionary. Component order is significant for matching."""

    version: str
    updated_at: str = ""
    sources: tuple[Any, ...] = ()
    components: dict[str, ComponentRule] = Field(..., min_length=1)
