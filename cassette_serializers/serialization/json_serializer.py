"""msgspec-based JSON serializer."""

import math
from typing import Any

from ..core.exceptions import DependencyUnavailableError
from ..core.types import CassetteData
from .base import BaseSerializer

try:
    import msgspec

    HAS_MSGSPEC = True
except ImportError:
    HAS_MSGSPEC = False


class JSONSerializer(BaseSerializer):
    """JSON serializer using msgspec for high performance.

    Output is pretty-printed with ``indent`` spaces so recorded cassettes
    diff cleanly; ``indent=0`` produces compact output.
    """

    file_extension = "json"
    syntax_errors = (msgspec.DecodeError,) if HAS_MSGSPEC else ()

    def __init__(self, indent: int = 2):
        if not HAS_MSGSPEC:
            raise DependencyUnavailableError(
                "json", "msgspec", "Install with: pip install msgspec"
            )
        self.indent = indent
        self._encoder = msgspec.json.Encoder()
        self._decoder = msgspec.json.Decoder()

    def _dump(self, value: CassetteData) -> str:
        check_finite(value)
        # msgspec raises UnicodeEncodeError for strings that are not valid UTF-8
        data = self._encoder.encode(value)
        if self.indent:
            data = msgspec.json.format(data, indent=self.indent)
        return data.decode("utf-8")

    def _load(self, data: str | bytes) -> CassetteData:
        return self._decoder.decode(data)


def check_finite(value: Any, path: str = "") -> None:
    """Raise ``ValueError`` for inf or nan anywhere in ``value``.

    msgspec writes non-finite floats as ``null``, which would not read back
    as the recorded value.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(
            f"Cannot serialize non-finite float {value!r} at {path or '<root>'!r} as JSON"
        )
    if isinstance(value, dict):
        for key, item in value.items():
            check_finite(item, f"{path}.{key}" if path else str(key))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            check_finite(item, f"{path}[{index}]")
