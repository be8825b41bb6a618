"""Base serialization interfaces."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol, runtime_checkable

from ..core.types import CassetteData
from .enrichment import ErrorClasses, handle_encoding_errors, handle_syntax_errors


@runtime_checkable
class Serializer(Protocol):
    """Protocol for cassette serializers.

    Any object with these three members can be registered, built-in or not.
    """

    @property
    def file_extension(self) -> str:
        """File extension (without a leading dot) for cassettes in this format."""
        ...

    def serialize(self, value: CassetteData) -> Any:
        """Serialize a mapping to ``str`` (or ``bytes`` for binary formats)."""
        ...

    def deserialize(self, data: Any) -> CassetteData:
        """Deserialize data produced by :meth:`serialize`."""
        ...


class BaseSerializer(ABC):
    """Base class for the built-in serializers.

    Subclasses implement :meth:`_dump` and :meth:`_load` with the native
    library calls and declare which of the library's exceptions signal an
    encoding failure and which signal a syntax failure. The public
    ``serialize``/``deserialize`` wrap the native calls so that those
    exceptions carry the same hints for every format.
    """

    file_extension: ClassVar[str]
    encoding_errors: ClassVar[ErrorClasses] = (UnicodeEncodeError,)
    syntax_errors: ClassVar[ErrorClasses] = ()

    def serialize(self, value: CassetteData) -> str | bytes:
        with handle_encoding_errors(self.encoding_errors):
            return self._dump(value)

    def deserialize(self, data: str | bytes) -> CassetteData:
        with handle_syntax_errors(data, self.syntax_errors):
            result = self._load(data)
        if not isinstance(result, dict):
            raise TypeError(
                f"Expected a mapping at the top level of the cassette, "
                f"got {type(result).__name__}"
            )
        return result

    @abstractmethod
    def _dump(self, value: CassetteData) -> str | bytes:
        """Encode ``value`` with the backing library."""
        ...

    @abstractmethod
    def _load(self, data: str | bytes) -> CassetteData:
        """Decode ``data`` with the backing library."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file_extension={self.file_extension!r})"
