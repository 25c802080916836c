"""
Query string construction for the trending endpoints.

The upstream expects every filter key to be present: an empty value means
"no filter", except ``since`` which defaults to ``daily``. What happens to a
filter whose value failed validation is decided by InvalidFilterPolicy.
"""

from enum import Enum
from urllib.parse import quote

from gtrending.exceptions import ValidationError
from gtrending.logging import get_logger

logger = get_logger("validation")

TIME_RANGES: tuple[str, ...] = ("daily", "weekly", "monthly")
DEFAULT_TIME_RANGE = "daily"

LANGUAGE_KEY = "language"
SINCE_KEY = "since"
SPOKEN_LANGUAGE_KEY = "spoken_lang_code"


class InvalidFilterPolicy(str, Enum):
    """What to do with a filter value that failed validation."""

    OMIT = "omit"  # leave the key out of the query
    AS_ABSENT = "as_absent"  # emit the key with its default value
    RAISE = "raise"  # raise ValidationError


def check_filter(
    key: str,
    value: str | None,
    valid: bool,
    policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
) -> bool:
    """
    Apply the RAISE policy to one validated filter as soon as it is known.

    Returns ``valid`` unchanged so callers can keep the result for the query.

    Raises:
        ValidationError: If ``value`` is invalid and the policy is RAISE
    """
    if value is not None and not valid and policy is InvalidFilterPolicy.RAISE:
        raise ValidationError(key, value)
    return valid


class QueryBuilder:
    """
    Accumulates filters in order and renders them as ``?k=v&k=v``.

    Example:
        ```python
        builder = QueryBuilder()
        builder.add("language", None, valid=True)
        builder.add("since", None, valid=True, default="daily")
        builder.build()  # "?language=&since=daily"
        ```
    """

    def __init__(self, policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT) -> None:
        self.policy = InvalidFilterPolicy(policy)
        self._params: list[tuple[str, str]] = []

    def add(
        self,
        key: str,
        value: str | None,
        valid: bool,
        default: str = "",
    ) -> "QueryBuilder":
        """
        Add one filter.

        Args:
            key: Query parameter name
            value: Caller-supplied value, or None when the filter is absent
            valid: Result of validating ``value`` (ignored when value is None)
            default: Value emitted when the filter is absent

        Returns:
            The builder, for chaining

        Raises:
            ValidationError: If ``value`` is invalid and the policy is RAISE
        """
        if value is None:
            self._params.append((key, default))
        elif valid:
            self._params.append((key, value))
        elif self.policy is InvalidFilterPolicy.RAISE:
            raise ValidationError(key, value)
        elif self.policy is InvalidFilterPolicy.AS_ABSENT:
            logger.warning("Invalid %s %r, using default %r", key, value, default)
            self._params.append((key, default))
        else:
            logger.warning("Invalid %s %r, dropping filter", key, value)
        return self

    def build(self) -> str:
        """Render the accumulated filters; the leading ``?`` is always present."""
        return "?" + "&".join(
            f"{key}={quote(value, safe='')}" for key, value in self._params
        )


def repositories_query(
    language: str | None,
    since: str | None,
    spoken_language_code: str | None,
    *,
    language_valid: bool = True,
    since_valid: bool = True,
    spoken_language_valid: bool = True,
    policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
) -> str:
    """Build the ``/repositories`` query: language, since, spoken_lang_code."""
    return (
        QueryBuilder(policy)
        .add(LANGUAGE_KEY, language, language_valid)
        .add(SINCE_KEY, since, since_valid, default=DEFAULT_TIME_RANGE)
        .add(SPOKEN_LANGUAGE_KEY, spoken_language_code, spoken_language_valid)
        .build()
    )


def developers_query(
    language: str | None,
    since: str | None,
    *,
    language_valid: bool = True,
    since_valid: bool = True,
    policy: InvalidFilterPolicy = InvalidFilterPolicy.OMIT,
) -> str:
    """Build the ``/developers`` query: language, since."""
    return (
        QueryBuilder(policy)
        .add(LANGUAGE_KEY, language, language_valid)
        .add(SINCE_KEY, since, since_valid, default=DEFAULT_TIME_RANGE)
        .build()
    )
