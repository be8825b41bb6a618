"""Serialization support for cassette-serializers."""

from .base import BaseSerializer, Serializer
from .compressed_serializer import CompressedSerializer
from .enrichment import (
    ENCODING_ERROR_HINT,
    ERB_SYNTAX_ERROR_HINT,
    handle_encoding_errors,
    handle_syntax_errors,
)
from .json_serializer import JSONSerializer
from .registry import BUILTIN_SERIALIZERS, SerializerRegistry
from .yaml_serializer import YAMLSerializer

__all__ = [
    "Serializer",
    "BaseSerializer",
    "SerializerRegistry",
    "BUILTIN_SERIALIZERS",
    "YAMLSerializer",
    "JSONSerializer",
    "CompressedSerializer",
    "ENCODING_ERROR_HINT",
    "ERB_SYNTAX_ERROR_HINT",
    "handle_encoding_errors",
    "handle_syntax_errors",
    "serializers",
]

# Process-wide registry shared by every caller
serializers = SerializerRegistry()
