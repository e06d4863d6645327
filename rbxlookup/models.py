from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeAlias

JSONValue: TypeAlias = (
    dict[str, Any]
    | list[Any]
    | str
    | int
    | float
    | bool
    | None
)

# group id -> rank within that group
RankMap: TypeAlias = dict[int, int]

# raw role object as returned by the groups API
RoleRecord: TypeAlias = dict[str, Any]


class AssetType(StrEnum):
    """Item types accepted by the inventory ownership endpoint."""

    ASSET = "Asset"
    GAME_PASS = "GamePass"
    BADGE = "Badge"
    BUNDLE = "Bundle"
