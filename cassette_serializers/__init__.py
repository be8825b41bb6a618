"""cassette-serializers: pluggable serializers for recorded HTTP cassettes."""

__version__ = "0.1.0"

from .config import SerializerConfig
from .core import (
    CassetteData,
    CassetteSerializerError,
    CassetteValue,
    DependencyUnavailableError,
    UnrecognizedSerializerError,
)
from .log_config import configure_logging, shutdown_logging
from .serialization import (
    BaseSerializer,
    CompressedSerializer,
    JSONSerializer,
    Serializer,
    SerializerRegistry,
    YAMLSerializer,
    serializers,
)

__all__ = [
    "__version__",
    "CassetteData",
    "CassetteValue",
    "SerializerConfig",
    "configure_logging",
    "shutdown_logging",
    "Serializer",
    "BaseSerializer",
    "SerializerRegistry",
    "YAMLSerializer",
    "JSONSerializer",
    "CompressedSerializer",
    "serializers",
    "CassetteSerializerError",
    "UnrecognizedSerializerError",
    "DependencyUnavailableError",
]
