"""
booksystem - a small, self-validating model of books, authors and reviews.
"""

from .domain import (
    Author,
    Book,
    Genre,
    Rating,
    Review,
    Reviewer,
    ValidationError,
    ViolationKind,
)

__all__ = [
    "Author",
    "Book",
    "Genre",
    "Rating",
    "Review",
    "Reviewer",
    "ValidationError",
    "ViolationKind",
]
