"""
gtrending logging utilities.

Provides configurable logging for HTTP requests/responses and filter
validation decisions.
"""

import logging
from typing import Any

# Create SDK-specific loggers
_sdk_logger = logging.getLogger("gtrending")
_http_logger = logging.getLogger("gtrending.http")
_validation_logger = logging.getLogger("gtrending.validation")

# Maximum number of characters of a response body kept in logs and errors
_BODY_PREVIEW_LENGTH = 200


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    validation_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure gtrending logging.

    Args:
        level: Default log level for all gtrending loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        validation_level: Log level for filter validation (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from gtrending.logging import configure_logging

        # Show every request made, including lookup list fetches
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _validation_logger.setLevel(
        validation_level if validation_level is not None else level
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a gtrending logger.

    Args:
        name: Logger name suffix (e.g., "http", "validation"). If None, returns main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"gtrending.{name}")


def shorten_body(text: str, limit: int = _BODY_PREVIEW_LENGTH) -> str:
    """
    Shorten a response body for inclusion in a log line or error message.

    Args:
        text: Body text
        limit: Maximum number of characters kept

    Returns:
        The text, cut to ``limit`` characters with "..." appended when cut
    """
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def log_http_request(method: str, url: str) -> None:
    """Log an HTTP request at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    _http_logger.debug(f"{method} {url}")


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    body: Any = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Only the size of list bodies is logged, not their content.

    Args:
        status_code: HTTP status code
        url: Request URL
        elapsed_ms: Request duration in milliseconds (optional)
        body: Parsed response body (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if isinstance(body, list):
        log_parts.append(f"items={len(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_filter_decision(filter_name: str, value: str, valid: bool) -> None:
    """Log the outcome of validating one filter value at DEBUG level."""
    if not _validation_logger.isEnabledFor(logging.DEBUG):
        return

    outcome = "valid" if valid else "invalid"
    _validation_logger.debug(f"{filter_name}={value!r}: {outcome}")


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "shorten_body",
    "log_http_request",
    "log_http_response",
    "log_filter_decision",
]
