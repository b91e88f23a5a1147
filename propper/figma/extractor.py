"""
Node Extractor — Turns a Figma node document into ExtractedComponentData.

Code-only props live in a hidden frame named "_Code Only Props" on the
component. Each TEXT layer in that frame documents one prop, either by its
layer name (set by the scaffolder) or as "name: value" text typed by hand.
"""

from __future__ import annotations

from typing import Any

from propper.models.component_models import (
    CodeOnlyPropEntry,
    ComponentProperty,
    ExtractedComponentData,
)

_FRAME_PREFIXES = ("_code only props", ".code only props")
_CONTAINER_TYPES = {"FRAME", "COMPONENT", "COMPONENT_SET", "INSTANCE"}


def is_code_only_frame(node: dict[str, Any]) -> bool:
    name = node.get("name", "").lower()
    return name.startswith(_FRAME_PREFIXES) or name == "code only props"


def _parse_text_entry(layer: dict[str, Any]) -> CodeOnlyPropEntry | None:
    layer_name = layer.get("name", "").strip()
    text = (layer.get("characters") or "").strip()

    # Scaffolded layers carry the prop name; default Figma names start with "Text"
    if layer_name and not layer_name.startswith("Text"):
        return CodeOnlyPropEntry(name=layer_name, value=text)

    name, sep, value = text.partition(":")
    if sep and name.strip():
        return CodeOnlyPropEntry(name=name.strip(), value=value.strip())
    if text:
        return CodeOnlyPropEntry(name=text, value="")
    return None


def extract_code_only_props(node: dict[str, Any]) -> list[CodeOnlyPropEntry]:
    """Entries documented in the node's hidden code-only props frame."""
    target = node
    # Component sets only hold variants; the frame lives on the first one
    if node.get("type") == "COMPONENT_SET":
        target = next(
            (c for c in node.get("children", []) if c.get("type") == "COMPONENT"),
            None,
        )
        if target is None:
            return []

    frame = next((c for c in target.get("children", []) if is_code_only_frame(c)), None)
    if frame is None or frame.get("type") != "FRAME":
        return []

    entries: list[CodeOnlyPropEntry] = []
    for child in frame.get("children", []):
        if child.get("type") != "TEXT":
            continue
        entry = _parse_text_entry(child)
        if entry is not None:
            entries.append(entry)
    return entries


def _component_properties(node: dict[str, Any]) -> dict[str, ComponentProperty]:
    # Components and sets expose definitions; instances expose current values
    definitions = node.get("componentPropertyDefinitions")
    if definitions is not None:
        return {
            key: ComponentProperty(type=d.get("type", ""), value=d.get("defaultValue"))
            for key, d in definitions.items()
        }
    values = node.get("componentProperties") or {}
    return {
        key: ComponentProperty(type=v.get("type", ""), value=v.get("value"))
        for key, v in values.items()
    }


def transform_node_to_component_data(node: dict[str, Any]) -> ExtractedComponentData:
    """Build the audit payload for a raw Figma REST node document."""
    code_only: list[CodeOnlyPropEntry] = []
    if node.get("type") in _CONTAINER_TYPES:
        code_only = extract_code_only_props(node)

    return ExtractedComponentData(
        id=node.get("id", ""),
        name=node.get("name", ""),
        type=node.get("type", ""),
        component_properties=_component_properties(node),
        code_only_props_frame=tuple(code_only),
    )
