"""Value types shared by the serializers."""

from typing import TypeAlias

CassetteValue: TypeAlias = (
    None
    | bool
    | int
    | float
    | str
    | list["CassetteValue"]
    | dict[str, "CassetteValue"]
)

# Serializers work on a top-level mapping of recorded interaction data
CassetteData: TypeAlias = dict[str, CassetteValue]
