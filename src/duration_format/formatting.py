"""Human-readable rendering of structured durations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from duration_format.config import FormatOptions
from duration_format.exceptions import ArgumentError
from duration_format.models import UNITS, is_nonzero, is_numeric, lookup_unit, unit_token

logger = logging.getLogger(__name__)

_MISSING: Any = object()


def _resolve_options(
    options: FormatOptions | Mapping[str, Any] | None, overrides: dict[str, Any]
) -> FormatOptions:
    if isinstance(options, FormatOptions):
        resolved = options
    else:
        resolved = FormatOptions.from_mapping(options)
    return resolved.merged(**overrides) if overrides else resolved


def format_duration(
    duration: Any = _MISSING,
    options: FormatOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Format a duration as a human-readable string (e.g. '9 months 2 days').

    Args:
        duration: Mapping (or record with unit attributes) of unit name to count.
            ``None`` or an empty mapping renders as the empty string.
        options: FormatOptions, or a plain mapping with any of the keys
            ``format``, ``zero``, ``delimiter``, ``locale``.
        **overrides: Same keys as ``options``, applied on top of it.

    Returns:
        One locale phrase per rendered unit, in ``format`` order, joined by
        the delimiter. Units that are unknown, unset, non-numeric, or zero
        (unless ``zero`` is set) are left out.

    Raises:
        ArgumentError: If called without a duration argument.

    Example:
        >>> format_duration({"years": 2, "months": 9, "weeks": 3}, delimiter=", ")
        '2 years, 9 months, 3 weeks'
    """
    if duration is _MISSING:
        raise ArgumentError("invalid call: duration argument is required")

    resolved = _resolve_options(options, overrides)

    chunks: list[str] = []
    for unit in resolved.format:
        if unit not in UNITS:
            logger.debug("Skipping unknown unit %r", unit)
            continue

        value = lookup_unit(duration, unit)
        if not is_numeric(value):
            if value is not None:
                logger.debug("Skipping %s: non-numeric value %r", unit, value)
            continue
        if not (resolved.zero or is_nonzero(value)):
            continue

        chunks.append(resolved.locale.format_distance(unit_token(unit), value))

    return resolved.delimiter.join(chunks)
