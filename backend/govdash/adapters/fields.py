"""Null-tolerant field readers shared by the entity adapters.

Persistence records come straight from JSON, so any field may be missing,
null, or of an unexpected type. These helpers always return a usable value.
"""
from collections.abc import Mapping
from datetime import date
from typing import Any

_EMPTY: Mapping = {}


def as_mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else _EMPTY


def first_set(*values: Any, default: Any = None) -> Any:
    """First value that is not None (the ``??`` chain)."""
    for value in values:
        if value is not None:
            return value
    return default


def first_truthy(*values: Any, default: Any = None) -> Any:
    """First truthy value (the ``||`` chain)."""
    for value in values:
        if value:
            return value
    return default


def text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def optional_text(value: Any) -> str | None:
    return None if value is None else text(value)


def number(value: Any, default: int | float = 0) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return default
        return int(parsed) if parsed.is_integer() else parsed
    return default


def optional_number(value: Any) -> int | float | None:
    return None if value is None else number(value, default=None)


def optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def flag(value: Any) -> bool:
    return bool(value)


def date_only(value: Any) -> str:
    """Calendar-date part of an ISO-8601 timestamp: everything before ``T``."""
    if not value:
        return ""
    return text(value).split("T")[0]


def today() -> str:
    return date.today().isoformat()


def related_name(related: Any, key: str = "full_name") -> str | None:
    """Display name of a nested related record, if it has a truthy one."""
    name = as_mapping(related).get(key)
    return text(name) if name else None


def string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [text(v) for v in value if v is not None]


def without_nulls(payload: dict) -> dict:
    """Copy of a write payload with unset (None) values left out."""
    return {k: v for k, v in payload.items() if v is not None}
