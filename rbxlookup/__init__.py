from .client import RobloxClient
from .exceptions import (
    HTTPStatusError,
    MissingFieldError,
    RobloxError,
    TransportError,
)
from .models import (
    AssetType,
    JSONValue,
    RankMap,
    RoleRecord,
)

__version__ = "1.0.0"

__all__ = [
    "AssetType",
    "HTTPStatusError",
    "JSONValue",
    "MissingFieldError",
    "RankMap",
    "RobloxClient",
    "RobloxError",
    "RoleRecord",
    "TransportError",
]
