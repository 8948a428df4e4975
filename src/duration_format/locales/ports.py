"""Abstract port for the locale collaborator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypedDict


class DistanceOptions(TypedDict, total=False):
    add_suffix: bool
    comparison: int


class LocalePort(ABC):
    code: str

    @abstractmethod
    def format_distance(
        self, token: str, count: float, options: DistanceOptions | None = None
    ) -> str:
        """Return the localized phrase for a distance token and its count.

        Implementations must be synchronous and free of side effects.
        """
        ...
