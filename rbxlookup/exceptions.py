from __future__ import annotations


class RobloxError(Exception):
    def __init__(
        self,
        message: str,
    ) -> None:
        super().__init__(message)
        self.message = message


class TransportError(RobloxError):
    """The request could not be completed or its body could not be decoded."""

    def __init__(
        self,
        original_error: BaseException | None,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            message
            if message is not None
            else str(original_error)
        )
        self.original_error = original_error
        self.status_code = status_code


class HTTPStatusError(TransportError):
    def __init__(
        self,
        status_code: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            None,
            message or f"HTTP {status_code}",
            status_code,
        )


class MissingFieldError(RobloxError):
    def __init__(
        self,
        field: str,
    ) -> None:
        super().__init__(
            f"response is missing field {field!r}"
        )
        self.field = field
