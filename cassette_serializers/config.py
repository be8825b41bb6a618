from pydantic import BaseModel
from pydantic import Field

DEFAULT_SERIALIZER = "yaml"


class SerializerConfig(BaseModel):
    """
    Configuration for a serializer registry and the built-ins it constructs.
    """

    default_serializer: str = DEFAULT_SERIALIZER
    # zlib levels; -1 lets zlib pick its default trade-off
    compression_level: int = Field(default=-1, ge=-1, le=9)
    json_indent: int = Field(default=2, ge=0)
