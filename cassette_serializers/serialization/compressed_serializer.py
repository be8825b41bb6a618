"""zlib-compressed YAML serializer."""

import zlib

from ..core.types import CassetteData
from .base import BaseSerializer
from .yaml_serializer import YAMLSerializer


class CompressedSerializer(BaseSerializer):
    """Serializer that deflates the output of a YAML serializer.

    Hints for encoding and syntax errors come from the wrapped serializer,
    which sees the uncompressed text.
    """

    file_extension = "zz"

    def __init__(
        self,
        inner: BaseSerializer | None = None,
        compression_level: int = zlib.Z_DEFAULT_COMPRESSION,
    ):
        """Initialize compressed serializer.

        Args:
            inner: Serializer producing the text to compress (YAML by default)
            compression_level: zlib compression level, -1 to 9
        """
        self.inner = inner if inner is not None else YAMLSerializer()
        self.compression_level = compression_level

    def _dump(self, value: CassetteData) -> bytes:
        text = self.inner.serialize(value)
        if isinstance(text, str):
            text = text.encode("utf-8")
        return zlib.compress(text, self.compression_level)

    def _load(self, data: str | bytes) -> CassetteData:
        if isinstance(data, str):
            raise TypeError(
                f"Compressed cassettes must be read as bytes, got {type(data).__name__}"
            )
        return self.inner.deserialize(zlib.decompress(data).decode("utf-8"))
