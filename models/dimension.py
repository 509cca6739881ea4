from __future__ import annotations

from enum import Enum


class Dimension(str, Enum):
    """Fields usable as a grouping key for statistics."""

    LEVEL = "level"
    COUNTRY = "country"
    CITY = "city"
