"""
Test fixtures shared across all Propper tests.
"""

import pytest

from propper.models.component_models import ExtractedComponentData
from propper.models.rule_models import RulesSchema


@pytest.fixture
def rules_dict():
    """Raw rules dictionary with Button, Input and Card."""
    return {
        "version": "test-1",
        "updatedAt": "2026-01-01",
        "components": {
            "Button": {
                "matchPatterns": ["button", "btn"],
                "requiredBooleanProps": [
                    {"name": "disabled", "type": "BOOLEAN", "level": "error"},
                    {"name": "loading", "type": "BOOLEAN", "level": "error"},
                ],
                "codeOnlyProps": [],
            },
            "Input": {
                "matchPatterns": ["input", "text ?field"],
                "requiredBooleanProps": [
                    {"name": "disabled", "type": "BOOLEAN", "level": "error"},
                ],
                "codeOnlyProps": [
                    {
                        "name": "onChange",
                        "category": "event",
                        "figmaPropType": "none",
                        "level": "error",
                        "description": "Change handler",
                    },
                    {
                        "name": "aria-describedby",
                        "category": "a11y",
                        "figmaPropType": "TEXT",
                        "level": "error",
                    },
                    {
                        "name": "name",
                        "category": "config",
                        "figmaPropType": "TEXT",
                        "level": "warning",
                        "defaultValue": "field",
                    },
                ],
            },
            "Card": {
                "matchPatterns": ["card"],
                "requiredBooleanProps": [],
                "codeOnlyProps": [],
            },
        },
    }


@pytest.fixture
def rules(rules_dict):
    """Validated rules schema built from rules_dict."""
    return RulesSchema.model_validate(rules_dict)


@pytest.fixture
def complete_button():
    """Button that declares every required boolean prop."""
    return ExtractedComponentData.model_validate({
        "id": "1:2",
        "name": "Button/Primary",
        "type": "COMPONENT",
        "componentProperties": {
            "disabled#4821": {"type": "BOOLEAN", "value": False},
            "Loading": {"type": "BOOLEAN", "value": False},
        },
        "codeOnlyPropsFrame": [],
    })


@pytest.fixture
def bare_button():
    """Button with no component properties at all."""
    return ExtractedComponentData(id="1:3", name="Button/Primary", type="COMPONENT")


@pytest.fixture
def button_payload():
    """Full /audit request body."""
    return {
        "componentData": {
            "id": "1:2",
            "name": "Button/Primary",
            "type": "COMPONENT",
            "componentProperties": {
                "disabled#12": {"type": "BOOLEAN", "value": False},
            },
            "codeOnlyPropsFrame": [{"name": "onClick", "value": "() => void"}],
            "children": [{"id": "9:9", "name": "Label", "type": "TEXT"}],
        },
        "context": {"framework": "react-shadcn"},
    }
