from __future__ import annotations

import builtins
import logging
from asyncio import sleep
from json import JSONDecodeError
from typing import TYPE_CHECKING, Any, Self

from aiohttp import (
    ClientError,
    ClientResponse,
    ClientSession,
    ClientTimeout,
    TCPConnector,
)

from ..exceptions import (
    HTTPStatusError,
    TransportError,
)
from .utils import build_endpoints

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)


class HTTPClient:
    def __init__(
        self,
        timeout: float | None = None,
        session: ClientSession | None = None,
        endpoints: Mapping[str, str] | None = None,
        user_agent: str | None = None,
        raise_for_status: bool = False,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._timeout = (
            ClientTimeout(total=timeout)
            if timeout is not None
            else None
        )
        self._endpoints = build_endpoints(
            endpoints
        )
        self._raise_for_status = raise_for_status
        self._headers = (
            {"User-Agent": user_agent}
            if user_agent
            else None
        )

    def _create_connector(self) -> TCPConnector:
        return TCPConnector(
            limit=100,
            limit_per_host=30,
            ttl_dns_cache=300,
            use_dns_cache=True,
            keepalive_timeout=30,
        )

    @property
    def session(self) -> ClientSession:
        if self._session is None or (
            self._owns_session
            and self._session.closed
        ):
            # without a timeout of our own, aiohttp's default applies
            options: dict[str, Any] = {}
            if self._timeout is not None:
                options["timeout"] = self._timeout
            self._session = ClientSession(
                headers=self._headers,
                connector=self._create_connector(),
                **options,
            )
            self._owns_session = True
        return self._session

    def _open_session(self) -> ClientSession:
        session = self.session
        if session.closed:
            # only a caller-supplied session can be closed here
            raise TransportError(
                RuntimeError("Session is closed")
            )
        return session

    async def close(self) -> None:
        if (
            self._owns_session
            and self._session
            and not self._session.closed
        ):
            await self._session.close()
            await sleep(0.1)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,  # ;;
        exc_val: BaseException | None,  # ;;
        exc_tb: object | None,  # ;;
    ) -> None:
        await self.close()

    def url_for(
        self,
        endpoint_type: str,
        path: str,
    ) -> str:
        try:
            base_url = self._endpoints[endpoint_type]
        except KeyError:
            raise ValueError(
                f"unknown endpoint type {endpoint_type!r}"
            ) from None
        return f"{base_url}{path}"

    async def get_json(
        self,
        endpoint_type: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:  # noqa: ANN401
        url = self.url_for(endpoint_type, path)

        try:
            async with self._open_session().get(
                url,
                params=params,
            ) as response:
                log.debug(
                    "GET %s -> %d",
                    response.url,
                    response.status,
                )
                await self._handle_response_errors(
                    response
                )
                # content_type=None: legacy endpoints do not always
                # label JSON bodies as application/json
                return await response.json(
                    content_type=None
                )

        except (
            ClientError,
            builtins.TimeoutError,
            JSONDecodeError,
            UnicodeDecodeError,
        ) as e:
            log.warning(
                "request to %s failed: %s", url, e
            )
            raise TransportError(e) from e

    async def get_text(
        self,
        endpoint_type: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> str:
        url = self.url_for(endpoint_type, path)

        try:
            async with self._open_session().get(
                url,
                params=params,
            ) as response:
                log.debug(
                    "GET %s -> %d",
                    response.url,
                    response.status,
                )
                await self._handle_response_errors(
                    response
                )
                return await response.text(
                    errors="replace"
                )

        except (
            ClientError,
            builtins.TimeoutError,
        ) as e:
            log.warning(
                "request to %s failed: %s", url, e
            )
            raise TransportError(e) from e

    async def _handle_response_errors(
        self,
        response: ClientResponse,
    ) -> None:
        if (
            not self._raise_for_status
            or response.status < 400
        ):
            return

        try:
            error_data = await response.json(
                content_type=None
            )
        except (
            JSONDecodeError,
            UnicodeDecodeError,
            ClientError,
        ):
            error_data = None

        raise HTTPStatusError(
            response.status,
            _error_message(error_data),
        )


def _error_message(
    error_data: Any,  # noqa: ANN401
) -> str | None:
    if not isinstance(error_data, dict):
        return None

    message = error_data.get("message")
    if isinstance(message, str) and message:
        return message

    errors = error_data.get("errors")
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, dict):
            message = first.get("message")
            if isinstance(message, str) and message:
                return message

    return None
