"""Unit tests for the YAML serializers."""

from unittest.mock import patch

import pytest
import yaml

from cassette_serializers.core.exceptions import DependencyUnavailableError
from cassette_serializers.serialization.yaml_serializer import (
    HAS_LIBYAML,
    PureSafeDumper,
    YAMLSerializer,
)

CASSETTE = {"a": 7, "null value": None, "nested": {"hash": [1, 2, 3]}}


class TestYAMLSerializer:
    """Test YAML serializer behaviour."""

    def test_output_is_block_yaml_document(self):
        """Test output starts a document and keeps insertion order."""
        serializer = YAMLSerializer(libyaml=False)

        text = serializer.serialize({"b": 1, "a": {"c": [1, 2]}})

        assert text.startswith("---")
        assert text.index("b: 1") < text.index("a:")
        assert "[1, 2]" not in text

    def test_unicode_written_verbatim(self):
        """Test non-ASCII text is stored readable, not escaped."""
        serializer = YAMLSerializer(libyaml=False)

        text = serializer.serialize({"body": "café"})

        assert "café" in text
        assert serializer.deserialize(text) == {"body": "café"}

    def test_null_is_native(self):
        """Test None maps to the YAML null marker."""
        text = YAMLSerializer(libyaml=False).serialize({"null value": None})
        assert yaml.safe_load(text) == {"null value": None}
        assert "null" in text

    def test_ambiguous_strings_stay_strings(self):
        """Test strings resolving to other YAML types are quoted."""
        serializer = YAMLSerializer(libyaml=False)
        cassette = {"code": "200", "flag": "yes", "empty": "", "nothing": "null"}

        assert serializer.deserialize(serializer.serialize(cassette)) == cassette

    def test_deserialize_bytes(self):
        """Test UTF-8 encoded input is accepted."""
        serializer = YAMLSerializer(libyaml=False)
        data = serializer.serialize(CASSETTE).encode("utf-8")

        assert serializer.deserialize(data) == CASSETTE

    def test_safe_loading(self):
        """Test arbitrary Python object tags are refused."""
        serializer = YAMLSerializer(libyaml=False)

        with pytest.raises(yaml.constructor.ConstructorError):
            serializer.deserialize("a: !!python/object/apply:os.getcwd []\n")

    def test_dumper_does_not_change_safe_dumper(self):
        """Test the string representer is installed on a subclass only."""
        assert PureSafeDumper.yaml_representers[str] is not (
            yaml.SafeDumper.yaml_representers[str]
        )
        assert "\\uDCFA" in yaml.safe_dump({"a": "\udcfa"})

    def test_default_backend(self):
        """Test the default backend follows libyaml availability."""
        assert YAMLSerializer().libyaml is HAS_LIBYAML

    def test_repr(self):
        """Test the repr names the backend."""
        assert repr(YAMLSerializer(libyaml=False)) == "YAMLSerializer(libyaml=False)"


class TestLibyamlBackend:
    """Test the libyaml-backed serializer."""

    def test_unavailable(self):
        """Test requesting libyaml without the bindings raises."""
        with (
            patch(
                "cassette_serializers.serialization.yaml_serializer.HAS_LIBYAML",
                False,
            ),
            pytest.raises(DependencyUnavailableError, match="pure_yaml"),
        ):
            YAMLSerializer(libyaml=True)

    @pytest.mark.skipif("not HAS_LIBYAML", reason="PyYAML built without libyaml")
    def test_backends_are_interchangeable(self):
        """Test pure and libyaml backends read each other's output."""
        pure = YAMLSerializer(libyaml=False)
        libyaml = YAMLSerializer(libyaml=True)

        assert libyaml.deserialize(pure.serialize(CASSETTE)) == CASSETTE
        assert pure.deserialize(libyaml.serialize(CASSETTE)) == CASSETTE


class TestYAMLNonFiniteFloats:
    """Test YAML keeps special float values that JSON cannot represent."""

    @pytest.mark.parametrize(
        "libyaml",
        [
            False,
            pytest.param(
                True,
                marks=pytest.mark.skipif(
                    not HAS_LIBYAML, reason="PyYAML built without libyaml"
                ),
            ),
        ],
    )
    def test_infinity_round_trips(self, libyaml):
        """Test inf and -inf survive a round trip."""
        serializer = YAMLSerializer(libyaml=libyaml)
        cassette = {"up": float("inf"), "down": float("-inf")}

        assert serializer.deserialize(serializer.serialize(cassette)) == cassette
