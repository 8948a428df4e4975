"""Formatting options with defaults for format_duration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from duration_format.locales.en_us import EN_US
from duration_format.locales.ports import LocalePort
from duration_format.models import UNITS

DEFAULT_DELIMITER = " "


def _resolve_format(value: Iterable[str] | str | None) -> tuple[str, ...] | None:
    # an explicitly empty sequence is kept; it renders nothing
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class FormatOptions:
    format: tuple[str, ...] = UNITS
    zero: bool = False
    delimiter: str = DEFAULT_DELIMITER
    locale: LocalePort = EN_US

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> FormatOptions:
        """Build options from a plain mapping; unrecognized keys are ignored."""
        return cls().merged(**dict(mapping or {}))

    def merged(self, **overrides: Any) -> FormatOptions:
        """Return a copy with the given fields overridden.

        Unset or falsy values keep the current field, except that an empty
        ``format`` sequence is honored and an explicit ``zero=False`` clears
        ``zero``. Unknown names are ignored.
        """
        changes: dict[str, Any] = {}

        unit_format = _resolve_format(overrides.get("format"))
        if unit_format is not None:
            changes["format"] = unit_format
        if overrides.get("zero") is not None:
            changes["zero"] = bool(overrides["zero"])
        if overrides.get("delimiter"):
            changes["delimiter"] = str(overrides["delimiter"])
        if overrides.get("locale") is not None:
            changes["locale"] = overrides["locale"]

        return replace(self, **changes) if changes else self
