"""
Tests for Property Normalizer.
"""

from propper.core.normalizer import documented_code_props, normalize_key, normalize_props
from propper.models.component_models import CodeOnlyPropEntry


def test_suffix_and_case_are_stripped():
    assert normalize_key("disabled#4821") == "disabled"
    assert normalize_key("Disabled") == "disabled"
    assert normalize_key("Aria-Label#12345") == "aria-label"


def test_only_trailing_numeric_suffix_is_stripped():
    assert normalize_key("size#large") == "size#large"
    assert normalize_key("a#1b") == "a#1b"
    assert normalize_key("icon#12#34") == "icon#12"


def test_suffix_must_be_ascii_digits_at_the_very_end():
    assert normalize_key("disabled#12\n") == "disabled#12\n"
    assert normalize_key("disabled#\u0661\u0662") == "disabled#\u0661\u0662"


def test_normalize_props_collapses_equivalent_keys():
    props = {"disabled#4821": {}, "Disabled": {}, "Loading#7": {}}
    assert normalize_props(props) == frozenset({"disabled", "loading"})


def test_normalize_props_handles_missing_mapping():
    assert normalize_props(None) == frozenset()
    assert normalize_props({}) == frozenset()


def test_documented_names_are_lowercased():
    entries = [
        CodeOnlyPropEntry(name="onClick", value="() => void"),
        CodeOnlyPropEntry(name="ARIA-LABEL"),
    ]
    assert documented_code_props(entries) == frozenset({"onclick", "aria-label"})
    assert documented_code_props(None) == frozenset()
