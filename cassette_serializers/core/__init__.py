"""Core components of cassette-serializers."""

from .exceptions import (
    CassetteSerializerError,
    DependencyUnavailableError,
    UnrecognizedSerializerError,
)
from .types import CassetteData, CassetteValue

__all__ = [
    "CassetteData",
    "CassetteValue",
    "CassetteSerializerError",
    "UnrecognizedSerializerError",
    "DependencyUnavailableError",
]
