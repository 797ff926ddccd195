"""Custom exceptions for megaphone."""


class MegaphoneError(Exception):
    """Base exception for all megaphone errors."""

    pass


class ConfigError(MegaphoneError):
    """Configuration-related errors."""

    pass


class MissingRequiredParameter(MegaphoneError, ValueError):
    """Raised before any request is sent when a required value is absent.

    Attributes:
        fields: Names of the missing parameters, in the order they were checked.
    """

    def __init__(self, *fields: str) -> None:
        self.fields = tuple(fields)
        if len(self.fields) == 1:
            message = f"{self.fields[0]} is required."
        else:
            message = f"{', '.join(self.fields[:-1])} and {self.fields[-1]} are required."
        super().__init__(message)


class MegaphoneAPIError(MegaphoneError):
    """Raised when the Megaphone API returns an error or is unreachable."""

    pass


class MegaphoneTimeoutError(MegaphoneAPIError):
    """The request did not complete within the configured timeout."""

    pass


class MegaphoneConnectionError(MegaphoneAPIError):
    """The API could not be reached."""

    pass


class MegaphoneHTTPError(MegaphoneAPIError):
    """The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        body: Raw response text.
    """

    def __init__(self, status_code: int, body: str, message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Megaphone API returned error status {status_code}: {body}")


class MegaphoneResponseError(MegaphoneAPIError):
    """The response body could not be decoded as JSON."""

    pass
