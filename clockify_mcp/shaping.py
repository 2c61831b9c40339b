"""Helpers that turn tool arguments into Clockify requests and results into text."""
import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlencode

from dateutil import parser

from .errors import InvalidArgumentsError

DATE_TIME_SEPARATOR = re.compile(r"\dT\d")


def split_args(args: dict, *keys: str) -> tuple[list, dict]:
    """Pull path identifiers out of the argument bag.

    Returns the identifier values in the order requested and a copy of the
    remaining arguments.
    """
    rest = dict(args)
    ids = [rest.pop(key, None) for key in keys]
    return ids, rest


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(query_value(v) for v in value)
    return str(value)


def with_query(path: str, params: dict) -> str:
    """Append every defined parameter to ``path``, keeping insertion order."""
    pairs = [(key, query_value(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return path
    return f"{path}?{urlencode(pairs)}"


def iso_instant(value: datetime) -> str:
    """Render an aware or naive (UTC) datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def now_instant() -> str:
    return iso_instant(datetime.now(timezone.utc))


def normalize_instant(field: str, value: str) -> str:
    """Expand date-only or free-form dates to a full ISO-8601 instant.

    Values that already contain the ``T`` separator are passed through.
    """
    if DATE_TIME_SEPARATOR.search(value):
        return value
    try:
        parsed = parser.parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentsError(f"{field} is not a valid date: {value!r}") from e
    return iso_instant(parsed)


def normalize_dates(payload: dict, *fields: str) -> dict:
    for field in fields:
        value = payload.get(field)
        if value:
            payload[field] = normalize_instant(field, value)
    return payload


def id_filter(values: list | None) -> dict | None:
    return {"ids": values} if values is not None else None


def compact(payload: dict) -> dict:
    """Drop top-level keys whose value is None."""
    return {key: value for key, value in payload.items() if value is not None}


def flag(value: Any) -> str:
    """Render a JSON scalar for display."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "unknown"
    return str(value)


def bullet_list(header: str, lines: list[str]) -> str:
    return "\n".join([header, *lines])
