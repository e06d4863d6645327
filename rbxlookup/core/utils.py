from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

from ..exceptions import MissingFieldError

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_API_ENDPOINTS: dict[str, str] = {
    "groups": "https://groups.roblox.com",
    "api": "https://api.roblox.com",
    "inventory": "https://inventory.roblox.com",
    "www": "https://www.roblox.com",
}


def build_endpoints(
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    endpoints = dict(_API_ENDPOINTS)
    if overrides:
        for name, base_url in overrides.items():
            endpoints[name] = base_url.rstrip("/")
    return endpoints


def get_path(
    value: Any,  # noqa: ANN401
    *keys: str,
) -> Any:  # noqa: ANN401
    """Walk nested objects, returning None at the first gap.

    Anything other than an object along the way (an array, a scalar or
    null) counts as a gap.
    """
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def as_int(
    value: Any,  # noqa: ANN401
) -> int | None:
    # bool subclasses int, and JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(
        value, int
    ):
        return None
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def require_int(
    value: Any,  # noqa: ANN401
    *keys: str,
    field: str,
) -> int:
    result = as_int(get_path(value, *keys))
    if result is None:
        raise MissingFieldError(field)
    return result
