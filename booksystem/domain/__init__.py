"""
Domain layer - Core business logic and entities.

This layer contains the catalog entities, value objects and the single
error type raised when any of them is given invalid data.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book, Review
from .enums import Genre, Rating
from .exceptions import ValidationError, ViolationKind
from .value_objects import Author, Reviewer

__all__ = [
    # Entities
    "Book",
    "Review",
    # Value Objects
    "Author",
    "Reviewer",
    # Enumerations
    "Genre",
    "Rating",
    # Errors
    "ValidationError",
    "ViolationKind",
]
