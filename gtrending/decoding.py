"""
Decoding of upstream JSON payloads into gtrending types.

Every decoder takes the already-parsed JSON value (``response.json()``) and
either returns fully typed records or raises DecodeError naming the path of
the first mismatch. Fields are never silently defaulted: a field is either
optional in the upstream schema or required here.

Star and fork counts have been served both as numbers and as strings
(``"1,204"``) across upstream versions, so they go through ``coerce_count``.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from gtrending.exceptions import DecodeError
from gtrending.types.developers import FeaturedRepo, TrendingDeveloper
from gtrending.types.languages import ProgrammingLanguage, SpokenLanguage
from gtrending.types.repositories import Contributor, TrendingRepository

T = TypeVar("T")


def coerce_count(value: Any, path: str = "") -> int:
    """
    Convert a count that may arrive as a number or a numeric string.

    Accepts ints, integral floats and strings such as ``"42"``, ``" 1,204 "``.

    Args:
        value: Raw JSON value
        path: Location of the value, used in error messages

    Returns:
        The count as an int

    Raises:
        DecodeError: If the value is not a non-negative whole number
    """
    if isinstance(value, bool):
        raise DecodeError(f"expected a count, got {value!r}", path)

    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise DecodeError(f"expected a whole number, got {value!r}", path)
        count = int(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace(",", "")
        if not (cleaned.isascii() and cleaned.isdigit()):
            raise DecodeError(f"expected a numeric string, got {value!r}", path)
        count = int(cleaned)
    else:
        raise DecodeError(f"expected a count, got {type(value).__name__}", path)

    if count < 0:
        raise DecodeError(f"count must not be negative, got {count}", path)
    return count


def _expect_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"expected an object, got {type(value).__name__}", path)
    return value


def _expect_list(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise DecodeError(f"expected an array, got {type(value).__name__}", path)
    return value


def _required_str(obj: dict[str, Any], key: str, path: str) -> str:
    if key not in obj:
        raise DecodeError(f"missing required field '{key}'", path)
    value = obj[key]
    if not isinstance(value, str):
        raise DecodeError(
            f"field '{key}' must be a string, got {type(value).__name__}", path
        )
    return value


def _optional_str(obj: dict[str, Any], key: str, path: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(
            f"field '{key}' must be a string, got {type(value).__name__}", path
        )
    return value


def _required_count(obj: dict[str, Any], key: str, path: str) -> int:
    if key not in obj:
        raise DecodeError(f"missing required field '{key}'", path)
    return coerce_count(obj[key], f"{path}.{key}")


def _decode_array(
    payload: Any, decode_item: Callable[[dict[str, Any], str], T]
) -> list[T]:
    items = _expect_list(payload, "$")
    return [
        decode_item(_expect_object(item, f"[{index}]"), f"[{index}]")
        for index, item in enumerate(items)
    ]


def decode_contributor(obj: dict[str, Any], path: str) -> Contributor:
    return Contributor(
        username=_required_str(obj, "username", path),
        href=_required_str(obj, "href", path),
        avatar=_required_str(obj, "avatar", path),
        name=_optional_str(obj, "name", path),
    )


def decode_repository(obj: dict[str, Any], path: str) -> TrendingRepository:
    """Decode a single repository object."""
    built_by_raw = obj.get("builtBy")
    built_by: tuple[Contributor, ...] = ()
    if built_by_raw is not None:
        built_by = tuple(
            decode_contributor(
                _expect_object(item, f"{path}.builtBy[{index}]"),
                f"{path}.builtBy[{index}]",
            )
            for index, item in enumerate(
                _expect_list(built_by_raw, f"{path}.builtBy")
            )
        )

    return TrendingRepository(
        author=_required_str(obj, "author", path),
        name=_required_str(obj, "name", path),
        url=_required_str(obj, "url", path),
        description=_optional_str(obj, "description", path),
        language=_optional_str(obj, "language", path),
        avatar=_required_str(obj, "avatar", path),
        stars=_required_count(obj, "stars", path),
        forks=_required_count(obj, "forks", path),
        current_period_stars=_required_count(obj, "currentPeriodStars", path),
        language_color=_optional_str(obj, "languageColor", path),
        built_by=built_by,
    )


def decode_featured_repo(obj: dict[str, Any], path: str) -> FeaturedRepo:
    # Older upstream versions name the field "repo_name".
    key = "name" if "name" in obj else "repo_name"
    return FeaturedRepo(
        name=_required_str(obj, key, path),
        description=_optional_str(obj, "description", path),
        url=_optional_str(obj, "url", path),
    )


def decode_developer(obj: dict[str, Any], path: str) -> TrendingDeveloper:
    """Decode a single developer object."""
    if "repo" not in obj:
        raise DecodeError("missing required field 'repo'", path)

    return TrendingDeveloper(
        username=_required_str(obj, "username", path),
        name=_required_str(obj, "name", path),
        type=_required_str(obj, "type", path),
        url=_required_str(obj, "url", path),
        avatar=_required_str(obj, "avatar", path),
        repo=decode_featured_repo(
            _expect_object(obj["repo"], f"{path}.repo"), f"{path}.repo"
        ),
    )


def decode_programming_language(
    obj: dict[str, Any], path: str
) -> ProgrammingLanguage:
    return ProgrammingLanguage(
        id=_required_str(obj, "id", path),
        name=_required_str(obj, "name", path),
    )


def decode_spoken_language(obj: dict[str, Any], path: str) -> SpokenLanguage:
    return SpokenLanguage(
        url_param=_required_str(obj, "url_param", path),
        name=_required_str(obj, "name", path),
    )


def decode_repositories(payload: Any) -> list[TrendingRepository]:
    """Decode the ``/repositories`` response array."""
    return _decode_array(payload, decode_repository)


def decode_developers(payload: Any) -> list[TrendingDeveloper]:
    """Decode the ``/developers`` response array."""
    return _decode_array(payload, decode_developer)


def decode_programming_languages(payload: Any) -> list[ProgrammingLanguage]:
    """Decode the ``/languages`` response array."""
    return _decode_array(payload, decode_programming_language)


def decode_spoken_languages(payload: Any) -> list[SpokenLanguage]:
    """Decode the ``/spoken_languages`` response array."""
    return _decode_array(payload, decode_spoken_language)


__all__ = [
    "coerce_count",
    "decode_repositories",
    "decode_developers",
    "decode_programming_languages",
    "decode_spoken_languages",
]
