"""English (US) locale: pluralized distance phrases."""

from __future__ import annotations

from typing import TypedDict

from duration_format.locales.ports import DistanceOptions, LocalePort


class PluralForms(TypedDict):
    one: str
    other: str


DISTANCE_PHRASES: dict[str, PluralForms | str] = {
    "lessThanXSeconds": {"one": "less than a second", "other": "less than {count} seconds"},
    "xSeconds": {"one": "1 second", "other": "{count} seconds"},
    "halfAMinute": "half a minute",
    "lessThanXMinutes": {"one": "less than a minute", "other": "less than {count} minutes"},
    "xMinutes": {"one": "1 minute", "other": "{count} minutes"},
    "aboutXHours": {"one": "about 1 hour", "other": "about {count} hours"},
    "xHours": {"one": "1 hour", "other": "{count} hours"},
    "xDays": {"one": "1 day", "other": "{count} days"},
    "aboutXWeeks": {"one": "about 1 week", "other": "about {count} weeks"},
    "xWeeks": {"one": "1 week", "other": "{count} weeks"},
    "aboutXMonths": {"one": "about 1 month", "other": "about {count} months"},
    "xMonths": {"one": "1 month", "other": "{count} months"},
    "aboutXYears": {"one": "about 1 year", "other": "about {count} years"},
    "xYears": {"one": "1 year", "other": "{count} years"},
    "overXYears": {"one": "over 1 year", "other": "over {count} years"},
    "almostXYears": {"one": "almost 1 year", "other": "almost {count} years"},
}


def _format_count(count: float) -> str:
    """Render integral floats without a fractional part (2.0 -> '2')."""
    if isinstance(count, float) and count.is_integer():
        return str(int(count))
    return str(count)


class EnUSLocale(LocalePort):
    code = "en-US"

    def format_distance(
        self, token: str, count: float, options: DistanceOptions | None = None
    ) -> str:
        """Pluralize ``token`` for ``count``, optionally as 'in ...' / '... ago'.

        Raises:
            ValueError: If the token is not a known distance token.
        """
        try:
            phrase = DISTANCE_PHRASES[token]
        except KeyError:
            raise ValueError(f"Unknown distance token '{token}'") from None

        if isinstance(phrase, str):
            result = phrase
        elif count == 1:
            result = phrase["one"]
        else:
            result = phrase["other"].format(count=_format_count(count))

        if options and options.get("add_suffix"):
            comparison = options.get("comparison")
            if comparison is not None and comparison > 0:
                return f"in {result}"
            return f"{result} ago"

        return result


EN_US = EnUSLocale()
