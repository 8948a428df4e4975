"""Duration data model: canonical units, unit lookup and unit tokens."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, Literal, TypedDict

Unit = Literal["years", "months", "weeks", "days", "hours", "minutes", "seconds"]

UNITS: tuple[Unit, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
)

TOKEN_MARKER = "x"


class Duration(TypedDict, total=False):
    years: int
    months: int
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int


def lookup_unit(duration: Any, unit: str) -> Any:
    """Return the value stored for ``unit``, or None when it is not specified.

    Mappings are read by key; any other record is read by attribute, so
    dataclasses or simple namespaces with unit fields work too.
    """
    if duration is None:
        return None
    if isinstance(duration, Mapping):
        return duration.get(unit)
    return getattr(duration, unit, None)


def is_numeric(value: Any) -> bool:
    """True for real numbers and Decimals; bools are not counts."""
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def is_nonzero(value: Real | Decimal) -> bool:
    # NaN is truthy in Python but never a meaningful count
    return bool(value) and value == value


def unit_token(unit: str) -> str:
    """Locale token for a unit, e.g. 'months' -> 'xMonths'."""
    return f"{TOKEN_MARKER}{unit[:1].upper()}{unit[1:]}"
