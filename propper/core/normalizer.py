"""
Property Normalizer — Canonical, comparison-ready property names.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from propper.models.component_models import CodeOnlyPropEntry

# Figma appends "#<node id>" to property keys to keep them unique
_UNIQUENESS_SUFFIX = re.compile(r"#[0-9]+\Z")


def normalize_key(key: str) -> str:
    """Lowercase a property key and drop its uniqueness suffix."""
    return _UNIQUENESS_SUFFIX.sub("", key.lower())


def normalize_props(props: Mapping[str, object] | None) -> frozenset[str]:
    """Normalized names of the declared component properties.

    "aria-label#12345" and "Aria-Label" both become "aria-label".
    """
    return frozenset(normalize_key(k) for k in (props or {}))


def documented_code_props(entries: Iterable[CodeOnlyPropEntry] | None) -> frozenset[str]:
    """Lowercased names documented in the code-only props frame."""
    return frozenset(e.name.lower() for e in (entries or ()))
