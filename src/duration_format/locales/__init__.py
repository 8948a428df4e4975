"""Locale collaborators that render (token, count) pairs."""

from duration_format.locales.en_us import EN_US, EnUSLocale
from duration_format.locales.ports import DistanceOptions, LocalePort

__all__ = ["DistanceOptions", "EN_US", "EnUSLocale", "LocalePort"]
