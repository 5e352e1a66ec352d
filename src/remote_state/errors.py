"""Exception hierarchy for remote-state."""

from __future__ import annotations

_CODE_HINTS: dict[int, str] = {
    400: "The request was rejected; check the arguments sent to the remote.",
    401: "Credentials are missing or invalid.",
    403: "The caller is not allowed to read this resource.",
    404: "The requested resource does not exist.",
    500: "The remote failed internally; try again later.",
    503: "The remote is unavailable; try again later.",
}


class RemoteStateError(Exception):
    """Base exception for all remote-state errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(RemoteStateError):
    """Configuration validation or resolution failed."""


class RemoteError(RemoteStateError):
    """A remote call failed with a discriminable ``code``.

    Producers raise this to describe domain failures. The core never inspects
    it: it travels as-is inside a ``Failure`` state.
    """

    def __init__(
        self,
        code: int,
        message: str | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message or "", hint=hint or _CODE_HINTS.get(code))
        self.code = code
        self.message = message

    def __str__(self) -> str:
        text = f"{type(self).__name__}: code={self.code}"
        if self.message:
            text += f" message={self.message}"
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(RemoteError):
    """The remote has no resource for the requested key (code 404)."""

    def __init__(self, message: str | None = None, *, hint: str | None = None) -> None:
        super().__init__(404, message, hint=hint)
