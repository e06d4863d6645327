from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from .core import (
    HTTPClient,
    as_int,
    get_path,
    require_int,
)
from .exceptions import MissingFieldError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from aiohttp import ClientSession

    from .models import (
        AssetType,
        JSONValue,
        RankMap,
        RoleRecord,
    )

log = logging.getLogger(__name__)


class RobloxClient:
    """Typed lookups against the Roblox web APIs.

    Every method issues a single GET and either returns a fully extracted
    value or raises. Transport failures surface as ``TransportError``; a
    response that decodes but lacks a required field raises
    ``MissingFieldError``. Timeouts, proxies and the session itself are
    configured here and handed to ``HTTPClient``.
    """

    def __init__(
        self,
        timeout: float | None = None,
        session: ClientSession | None = None,
        endpoints: Mapping[str, str] | None = None,
        user_agent: str | None = None,
        raise_for_status: bool = False,
    ) -> None:
        self._http = HTTPClient(
            timeout=timeout,
            session=session,
            endpoints=endpoints,
            user_agent=user_agent,
            raise_for_status=raise_for_status,
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def get_user_roles(
        self,
        user_id: int,
    ) -> RankMap:
        """Map each group the user belongs to onto their rank in it."""
        response = await self._http.get_json(
            "groups",
            f"/v2/users/{user_id}/groups/roles",
        )

        data = get_path(response, "data")
        if not isinstance(data, list):
            raise self._missing("data")

        ranks: RankMap = {}
        for i, entry in enumerate(data):
            group_id = self._require(
                entry,
                "group",
                "id",
                field=f"data[{i}].group.id",
            )
            ranks[group_id] = self._require(
                entry,
                "role",
                "rank",
                field=f"data[{i}].role.rank",
            )

        return ranks

    async def get_username_from_id(
        self,
        user_id: int,
    ) -> str:
        response = await self._http.get_json(
            "api", f"/users/{user_id}"
        )

        username = get_path(response, "Username")
        if not isinstance(username, str):
            raise self._missing("Username")
        return username

    async def get_id_from_username(
        self,
        username: str,
    ) -> int | None:
        # unknown usernames come back without an Id
        response = await self._http.get_json(
            "api",
            "/users/get-by-username",
            params={"username": username},
        )
        return as_int(get_path(response, "Id"))

    async def has_asset(
        self,
        user_id: int,
        item_id: int,
        asset_type: AssetType | str,
    ) -> bool:
        response = await self._http.get_json(
            "inventory",
            f"/v1/users/{user_id}/items/{asset_type}/{item_id}",
        )

        data = get_path(response, "data")
        return isinstance(data, list) and bool(data)

    async def check_code(
        self,
        user_id: int,
        code: str,
    ) -> bool:
        """Report whether ``code`` appears verbatim on the user's profile page."""
        body = await self._http.get_text(
            "www", f"/users/{user_id}/profile"
        )
        return code in body

    async def get_group_rank(
        self,
        group_id: int,
        rank_id: int,
    ) -> RoleRecord | None:
        roles = await self._get_group_roles(
            group_id
        )
        if roles is None:
            return None

        for role in roles:
            rank = as_int(get_path(role, "rank"))
            if (rank or 0) == rank_id:
                return role

        return None

    async def get_group_ranks(
        self,
        group_id: int,
        min_rank: int,
        max_rank: int,
    ) -> list[RoleRecord]:
        """Return the group's roles ranked within ``[min_rank, max_rank]``.

        Unlike ``get_group_rank``, a role without an integer ``rank`` is an
        error here rather than being treated as rank 0.
        """
        roles = await self._get_group_roles(
            group_id
        )
        if roles is None:
            return []

        return [
            role
            for i, role in enumerate(roles)
            if min_rank
            <= self._require(
                role,
                "rank",
                field=f"roles[{i}].rank",
            )
            <= max_rank
        ]

    async def _get_group_roles(
        self,
        group_id: int,
    ) -> list[JSONValue] | None:
        response = await self._http.get_json(
            "groups",
            f"/v1/groups/{group_id}/roles",
        )

        roles = get_path(response, "roles")
        if not isinstance(roles, list):
            return None
        return roles

    @staticmethod
    def _missing(
        field: str,
    ) -> MissingFieldError:
        log.debug(
            "response missing field %s", field
        )
        return MissingFieldError(field)

    @staticmethod
    def _require(
        value: Any,  # noqa: ANN401
        *keys: str,
        field: str,
    ) -> int:
        try:
            return require_int(
                value, *keys, field=field
            )
        except MissingFieldError:
            log.debug(
                "response missing field %s", field
            )
            raise
