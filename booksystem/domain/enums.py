"""
Closed enumerations used by the catalog entities.

Member values are the display names used when an entity is rendered
(e.g. ``str(Genre.SCIENCE_FICTION) == "ScienceFiction"``).
"""

from enum import Enum


class _DisplayEnum(str, Enum):
    """String enum that renders as its display value."""

    def __str__(self) -> str:
        return self.value


class Genre(_DisplayEnum):
    """Category a book is filed under."""

    FICTION = "Fiction"
    NON_FICTION = "NonFiction"
    FANTASY = "Fantasy"
    MYSTERY = "Mystery"
    BIOGRAPHY = "Biography"
    SCIENCE_FICTION = "ScienceFiction"
    ROMANCE = "Romance"


class Rating(_DisplayEnum):
    """A reviewer's recommendation for a book."""

    BUY = "Buy"
    RECOMMEND = "Recommend"
    AVOID = "Avoid"
