"""PyYAML-based serializers."""

from typing import Any

import yaml  # type: ignore[import-untyped]

from ..core.exceptions import DependencyUnavailableError
from ..core.types import CassetteData
from .base import BaseSerializer

try:
    from yaml import CSafeDumper, CSafeLoader

    HAS_LIBYAML = True
except ImportError:
    HAS_LIBYAML = False


def _represent_utf8_str(dumper: Any, data: str) -> Any:
    # The pure-Python emitter escapes lone surrogates; libyaml rejects them.
    # Reject them in both so cassettes only ever hold valid UTF-8 text.
    data.encode("utf-8")
    return dumper.represent_str(data)


class PureSafeDumper(yaml.SafeDumper):
    """SafeDumper that refuses strings which are not valid UTF-8."""


PureSafeDumper.add_representer(str, _represent_utf8_str)


if HAS_LIBYAML:

    class LibyamlSafeDumper(CSafeDumper):
        """libyaml-backed SafeDumper with the same string policy."""

    LibyamlSafeDumper.add_representer(str, _represent_utf8_str)


class YAMLSerializer(BaseSerializer):
    """YAML serializer using PyYAML safe loading and dumping.

    Args:
        libyaml: Use the libyaml C bindings. ``None`` picks them when they
            are available and falls back to the pure-Python implementation.
    """

    file_extension = "yml"
    syntax_errors = (yaml.YAMLError,)

    def __init__(self, libyaml: bool | None = None):
        if libyaml is None:
            libyaml = HAS_LIBYAML
        if libyaml and not HAS_LIBYAML:
            raise DependencyUnavailableError(
                "libyaml",
                "PyYAML with libyaml bindings",
                "Reinstall PyYAML with libyaml available, "
                "or use the pure_yaml serializer.",
            )
        self.libyaml = libyaml
        if libyaml:
            self._loader = CSafeLoader
            self._dumper = LibyamlSafeDumper
        else:
            self._loader = yaml.SafeLoader
            self._dumper = PureSafeDumper

    def _dump(self, value: CassetteData) -> str:
        return yaml.dump(
            value,
            Dumper=self._dumper,
            explicit_start=True,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def _load(self, data: str | bytes) -> CassetteData:
        document = yaml.load(data, Loader=self._loader)
        # An empty document is an empty cassette
        if document is None:
            return {}
        return document

    def __repr__(self) -> str:
        return f"YAMLSerializer(libyaml={self.libyaml})"
