"""Format structured durations as human-readable, localized strings."""

from duration_format.config import FormatOptions
from duration_format.exceptions import ArgumentError
from duration_format.formatting import format_duration
from duration_format.locales import EN_US, LocalePort
from duration_format.models import UNITS, Duration

__all__ = [
    "ArgumentError",
    "Duration",
    "EN_US",
    "FormatOptions",
    "LocalePort",
    "UNITS",
    "format_duration",
]
