"""Name-keyed registry of cassette serializers."""

import logging
import threading
from collections.abc import Callable

from ..config import SerializerConfig
from ..core.exceptions import UnrecognizedSerializerError
from .base import Serializer
from .compressed_serializer import CompressedSerializer
from .json_serializer import JSONSerializer
from .yaml_serializer import YAMLSerializer

logger = logging.getLogger(__name__)

SerializerFactory = Callable[[SerializerConfig], Serializer]

BUILTIN_SERIALIZERS: dict[str, SerializerFactory] = {
    "yaml": lambda config: YAMLSerializer(),
    "pure_yaml": lambda config: YAMLSerializer(libyaml=False),
    "libyaml": lambda config: YAMLSerializer(libyaml=True),
    "compressed": lambda config: CompressedSerializer(
        compression_level=config.compression_level
    ),
    "json": lambda config: JSONSerializer(indent=config.json_indent),
}


class SerializerRegistry:
    """Registry for cassette serializers.

    Built-in serializers are constructed on first lookup and cached, so a
    missing optional dependency only fails lookups of the format needing it.
    Serializers registered explicitly take precedence over built-ins of the
    same name.
    """

    def __init__(self, config: SerializerConfig | None = None) -> None:
        self.config = config or SerializerConfig()
        self._serializers: dict[str, Serializer] = {}
        self._lock = threading.Lock()

    def get(self, name: str | None = None) -> Serializer:
        """Get a serializer by name, constructing a built-in on first use.

        Args:
            name: Serializer name (the configured default if None)

        Returns:
            The cached serializer instance

        Raises:
            UnrecognizedSerializerError: If the name is not registered or built in
            DependencyUnavailableError: If a built-in needs a missing library
        """
        if name is None:
            name = self.config.default_serializer

        try:
            return self._serializers[name]
        except KeyError:
            pass

        factory = BUILTIN_SERIALIZERS.get(name)
        if factory is None:
            raise UnrecognizedSerializerError(name, self.builtin_names())

        with self._lock:
            # Another thread may have finished construction while we waited
            if name not in self._serializers:
                self._serializers[name] = factory(self.config)
                logger.debug("Constructed built-in serializer %r", name)
            return self._serializers[name]

    def register(self, name: str, serializer: Serializer) -> None:
        """Register a serializer, overriding any existing entry for the name."""
        with self._lock:
            if name in self._serializers:
                logger.warning(
                    "There is already a cassette serializer registered for %r. "
                    "Overriding it.",
                    name,
                )
            self._serializers[name] = serializer

    def names(self) -> list[str]:
        """List the names of serializers currently held by the registry."""
        return list(self._serializers.keys())

    def builtin_names(self) -> list[str]:
        """List the built-in serializer names this registry can construct."""
        return list(BUILTIN_SERIALIZERS.keys())

    def clear(self) -> None:
        """Drop every cached serializer; built-ins are rebuilt on next lookup."""
        with self._lock:
            self._serializers.clear()

    def __getitem__(self, name: str) -> Serializer:
        return self.get(name)

    def __setitem__(self, name: str, serializer: Serializer) -> None:
        self.register(name, serializer)

    def __contains__(self, name: object) -> bool:
        return name in self._serializers
