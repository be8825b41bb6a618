"""Unit tests for the msgspec JSON serializer."""

import json
from unittest.mock import patch

import pytest

from cassette_serializers.core.exceptions import DependencyUnavailableError
from cassette_serializers.serialization.json_serializer import JSONSerializer

CASSETTE = {"a": 7, "null value": None, "nested": {"hash": [1, 2, 3]}}


class TestJSONSerializer:
    """Test JSON serializer behaviour."""

    def test_init_without_msgspec(self):
        """Test initialization when msgspec is not available."""
        with (
            patch("cassette_serializers.serialization.json_serializer.HAS_MSGSPEC", False),
            pytest.raises(DependencyUnavailableError, match="pip install msgspec"),
        ):
            JSONSerializer()

    def test_pretty_printed(self):
        """Test output is indented and valid JSON."""
        text = JSONSerializer().serialize(CASSETTE)

        assert '\n  "a": 7' in text
        assert json.loads(text) == CASSETTE

    def test_custom_indent(self):
        """Test the indentation width is configurable."""
        text = JSONSerializer(indent=4).serialize({"a": 1})
        assert '\n    "a": 1' in text

    def test_compact(self):
        """Test indent=0 produces compact output."""
        text = JSONSerializer(indent=0).serialize(CASSETTE)

        assert "\n" not in text
        assert text.startswith('{"a":7')

    def test_null_is_native(self):
        """Test None maps to JSON null."""
        assert '"null value": null' in JSONSerializer().serialize(CASSETTE)

    def test_key_order_preserved(self):
        """Test keys are written in insertion order."""
        text = JSONSerializer(indent=0).serialize({"b": 1, "a": 2})
        assert text == '{"b":1,"a":2}'

    def test_deserialize_bytes(self):
        """Test UTF-8 encoded input is accepted."""
        serializer = JSONSerializer()
        data = serializer.serialize(CASSETTE).encode("utf-8")

        assert serializer.deserialize(data) == CASSETTE

    def test_unicode_round_trip(self):
        """Test non-ASCII text round-trips."""
        serializer = JSONSerializer()
        cassette = {"body": "naïve ☕"}

        assert serializer.deserialize(serializer.serialize(cassette)) == cassette


class TestNonFiniteFloats:
    """Test values JSON cannot represent are refused instead of written as null."""

    @pytest.mark.parametrize(
        "value", [float("inf"), float("-inf"), float("nan")], ids=["inf", "-inf", "nan"]
    )
    def test_top_level_value_rejected(self, value):
        """Test a non-finite float under a top-level key is refused."""
        with pytest.raises(ValueError, match=r"non-finite float .* at 'duration'"):
            JSONSerializer().serialize({"duration": value})

    @pytest.mark.parametrize(
        "value", [float("inf"), float("-inf"), float("nan")], ids=["inf", "-inf", "nan"]
    )
    def test_nested_path_reported(self, value):
        """Test the error names the full key path of the value."""
        cassette = {"http_interactions": [{"response": {"timings": [0.5, value]}}]}

        with pytest.raises(ValueError) as exc_info:
            JSONSerializer().serialize(cassette)

        assert "'http_interactions[0].response.timings[1]'" in str(exc_info.value)
        assert "preserve_exact_body_bytes" not in str(exc_info.value)

    def test_finite_floats_allowed(self):
        """Test ordinary floats still round-trip."""
        serializer = JSONSerializer()
        cassette = {"ratio": 0.25, "big": 1e300}

        assert serializer.deserialize(serializer.serialize(cassette)) == cassette
