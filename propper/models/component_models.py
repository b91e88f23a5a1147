"""
Component Data Models — What the extraction side reports about a Figma node.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ComponentProperty(BaseModel):
    """A native Figma component property (BOOLEAN, VARIANT, TEXT, INSTANCE_SWAP)."""

    model_config = ConfigDict(frozen=True)

    type: str
    value: bool | str | None = None


class CodeOnlyPropEntry(BaseModel):
    """One documentation entry from the hidden "_Code Only Props" frame."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""


class ExtractedComponentData(BaseModel):
    """
    Minimal component snapshot submitted for auditing.

    Extra fields sent by clients (layer trees, fills, etc.) are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    id: str = ""
    name: str = ""
    type: str = ""
    component_properties: dict[str, ComponentProperty] = Field(
        default_factory=dict,
        description="Declared property key -> {type, value}; keys may carry a '#<digits>' suffix",
    )
    code_only_props_frame: tuple[CodeOnlyPropEntry, ...] = ()

    @field_validator("id", "name", "type", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        # Plugins send null for unnamed nodes; treat it like a missing name
        return "" if value is None else value
