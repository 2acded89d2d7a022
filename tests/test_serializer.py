"""Tests for JSON serialization."""

import json

import pytest

from motion_spec_extractor.core.serializer import (
    CIRCULAR_MARKER,
    default_output_name,
    sanitize_for_json,
    to_json,
)


class TestSanitizeForJson:
    """Test conversion to strict-JSON-safe trees."""

    def test_non_finite_numbers_become_null(self) -> None:
        value = {"a": float("nan"), "b": [float("inf"), -float("inf"), 1.5]}

        assert sanitize_for_json(value) == {"a": None, "b": [None, None, 1.5]}

    def test_tuples_become_lists(self) -> None:
        assert sanitize_for_json({"p": (1, 2)}) == {"p": [1, 2]}

    def test_circular_reference(self) -> None:
        """Test that a self-containing container is cut at the repeat."""
        layer = {"name": "Loop"}
        layer["self"] = layer

        assert sanitize_for_json(layer) == {"name": "Loop", "self": CIRCULAR_MARKER}

    def test_shared_reference_is_not_circular(self) -> None:
        shared = [1, 2]

        assert sanitize_for_json({"a": shared, "b": shared}) == {"a": [1, 2], "b": [1, 2]}

    def test_scalars_unchanged(self) -> None:
        assert sanitize_for_json("text") == "text"
        assert sanitize_for_json(True) is True
        assert sanitize_for_json(None) is None


class TestToJson:
    """Test document serialization."""

    def test_pretty(self) -> None:
        text = to_json({"version": "1.0.0", "layers": []})

        assert text == '{\n  "version": "1.0.0",\n  "layers": []\n}'

    def test_compact(self) -> None:
        text = to_json({"version": "1.0.0", "layers": [1, 2]}, pretty=False)

        assert text == '{"version":"1.0.0","layers":[1,2]}'

    def test_pretty_and_compact_carry_same_content(self) -> None:
        document = {"name": "Main", "value": [0.5, None], "nested": {"ok": True}}

        assert json.loads(to_json(document)) == json.loads(to_json(document, pretty=False))

    def test_nan_written_as_null(self) -> None:
        assert to_json({"v": float("nan")}, pretty=False) == '{"v":null}'

    def test_unicode_kept(self) -> None:
        assert to_json({"name": "Überschrift"}, pretty=False) == '{"name":"Überschrift"}'


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Main", "Main_motion-spec.json"),
        ("Hero Intro (v2)", "Hero_Intro__v2__motion-spec.json"),
        ("lower-third_01", "lower-third_01_motion-spec.json"),
        (None, "composition_motion-spec.json"),
    ],
)
def test_default_output_name(name, expected) -> None:
    assert default_output_name(name) == expected
