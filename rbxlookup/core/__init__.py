from .http import HTTPClient
from .utils import (
    as_int,
    build_endpoints,
    get_path,
    require_int,
)

__all__ = [
    "HTTPClient",
    "as_int",
    "build_endpoints",
    "get_path",
    "require_int",
]
