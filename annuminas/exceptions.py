"""Annuminas exception classes."""


class HubError(Exception):
    """Base exception for all Annuminas errors."""

    code = "HUB_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        self.context: list[str] = []
        super().__init__(message)

    def __str__(self) -> str:
        prefix = "".join(f"{tag}: " for tag in self.context)
        return f"[{self.code}] {prefix}{self.message}"

    def with_context(self, tag: str) -> "HubError":
        """
        Return a copy of this error tagged with the operation that failed.

        Tags stack outermost-first, so ``ensure`` failing inside ``create``
        renders as ``create repo: <message>``.

        Args:
            tag: Short description of the failed step (e.g. "create repo")

        Returns:
            An error of the same class carrying the extra context
        """
        wrapped = type(self).__new__(type(self), *self.args)
        wrapped.__dict__.update(self.__dict__)
        wrapped.context = [tag, *self.context]
        return wrapped


class ConfigurationError(HubError):
    """Raised when client configuration is invalid or missing."""

    code = "CONFIGURATION_ERROR"


class AuthError(HubError):
    """Raised when the credential exchange fails or returns unusable data."""

    code = "AUTH_FAILED"


class TransportError(HubError):
    """Raised on network or connection failures."""

    code = "TRANSPORT_ERROR"


class APIError(HubError):
    """Raised when the registry answers an authenticated call with >= 400."""

    code = "API_ERROR"

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class EncodeError(HubError):
    """Raised when a request payload cannot be encoded as JSON."""

    code = "ENCODE_ERROR"


class DecodeError(HubError):
    """Raised when a success response cannot be decoded."""

    code = "DECODE_ERROR"
