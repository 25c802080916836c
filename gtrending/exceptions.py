"""gtrending exception classes."""



class GTrendingError(Exception):
    """Base exception for all gtrending errors."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GTrendingError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(GTrendingError):
    """Raised when a request fails: network, timeout, TLS or non-2xx status."""

    pass


class NotFoundError(TransportError):
    """Raised when the upstream returns 404."""

    pass


class RateLimitedError(TransportError):
    """Raised when the upstream returns 429."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int | None,
        status_code: int | None = 429,
    ) -> None:
        super().__init__(code, message, status_code)
        self.retry_after = retry_after


class ServerError(TransportError):
    """Raised on server errors (5xx)."""

    pass


class DecodeError(GTrendingError):
    """Raised when a response body is not JSON or does not match the schema."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__("DECODE_ERROR", message)


class ValidationError(GTrendingError):
    """Raised when a filter value is rejected and the policy says to fail."""

    def __init__(self, filter_name: str, value: str) -> None:
        self.filter_name = filter_name
        self.value = value
        super().__init__(
            f"INVALID_{filter_name.upper()}",
            f"{value!r} is not a valid value for '{filter_name}'",
        )
