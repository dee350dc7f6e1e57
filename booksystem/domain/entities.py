"""
Domain entities for the book catalog.

A Book is the aggregate root: it owns its reviews and decides which
reviews may be attached to it. A Review is created free-standing and
only becomes part of a Book through Book.add_review().
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .enums import Genre, Rating
from .exceptions import ValidationError, ViolationKind
from .utils.validation import require_member, require_reference, require_text
from .value_objects import Author, Reviewer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    """
    A reviewer's rating and comment for the book identified by ``isbn``.

    The ISBN is not checked against any book here; that happens when the
    review is attached with Book.add_review().
    """

    isbn: str
    """ISBN of the book being reviewed"""

    reviewer: Reviewer
    """Who wrote the review"""

    rating: Rating
    """Buy, Recommend or Avoid"""

    comment: str
    """Free-text comment"""

    def __post_init__(self) -> None:
        """Validate review data."""
        isbn = require_text(self.isbn, "isbn", "ISBN")
        require_reference(self.reviewer, "reviewer", "Reviewer cannot be None.")
        if not isinstance(self.reviewer, Reviewer):
            raise ValidationError(
                "reviewer",
                f"Reviewer must be a Reviewer, got {type(self.reviewer).__name__}.",
                ViolationKind.FORMAT,
            )
        rating = require_member(self.rating, Rating, "rating")
        comment = require_text(self.comment, "comment", "Comment")

        object.__setattr__(self, "isbn", isbn)
        object.__setattr__(self, "rating", rating)
        object.__setattr__(self, "comment", comment)

    def __str__(self) -> str:
        return f"{self.isbn},{self.reviewer},{self.rating},{self.comment}"


class Book:
    """
    Represents a book in the catalog.

    ``isbn``, ``title``, ``publish_year`` and ``author`` are fixed at
    construction. ``genre`` may be reassigned at any time. Reviews can
    only be appended, through add_review().

    Not thread-safe: callers sharing a Book between threads must serialize
    add_review() and genre assignment themselves.

    Usage:
        book = Book("978-0-7653-8669-4", "Invisible Man", 1952, author, Genre.FICTION)
        book.add_review(Review("978-0-7653-8669-4", reviewer, Rating.BUY, "Loved it!"))
        book.total_reviews  # 1
    """

    def __init__(
        self,
        isbn: str,
        title: str,
        publish_year: int,
        author: Author,
        genre: Genre,
    ) -> None:
        """
        Create a validated book with no reviews.

        Args:
            isbn: Book identifier, stored trimmed
            title: Book title, stored trimmed
            publish_year: Year of publication, must be > 0
            author: The book's author (required)
            genre: One of the Genre members

        Raises:
            ValidationError: On the first field that fails validation
        """
        self._isbn = require_text(isbn, "isbn", "ISBN")
        self._title = require_text(title, "title", "Title")

        if isinstance(publish_year, bool) or not isinstance(publish_year, int):
            raise ValidationError(
                "publish_year",
                f"Publish year must be a whole number, got {publish_year!r}.",
                ViolationKind.FORMAT,
            )
        if publish_year <= 0:
            raise ValidationError(
                "publish_year",
                "Publish year must be a positive, non-zero whole number.",
                ViolationKind.RANGE,
            )
        self._publish_year = publish_year

        self._author = require_reference(author, "author", "Author is required.")
        if not isinstance(author, Author):
            raise ValidationError(
                "author",
                f"Author must be an Author, got {type(author).__name__}.",
                ViolationKind.FORMAT,
            )

        self._genre = require_member(genre, Genre, "genre")
        self._reviews: List[Review] = []

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @property
    def publish_year(self) -> int:
        return self._publish_year

    @property
    def author(self) -> Author:
        return self._author

    @property
    def genre(self) -> Genre:
        return self._genre

    @genre.setter
    def genre(self, value: Genre) -> None:
        self._genre = require_member(value, Genre, "genre")

    @property
    def reviews(self) -> Tuple[Review, ...]:
        """Attached reviews in submission order (read-only snapshot)."""
        return tuple(self._reviews)

    @property
    def total_reviews(self) -> int:
        """Number of attached reviews, recomputed on every access."""
        return len(self._reviews)

    def add_review(self, review: Review) -> None:
        """
        Attach a review to this book.

        The review must be for this book's ISBN, and its reviewer must not
        have reviewed this book already (reviewers are matched by first and
        last name). The first review submitted by a reviewer wins.

        Raises:
            ValidationError: If the review is missing, targets another ISBN,
                or comes from a reviewer who already reviewed this book.
        """
        require_reference(review, "review", "Review required.")
        if not isinstance(review, Review):
            raise ValidationError(
                "review",
                f"Review must be a Review, got {type(review).__name__}.",
                ViolationKind.FORMAT,
            )

        if review.isbn != self._isbn:
            logger.info(
                "Rejected review for ISBN %s on book %s: ISBN mismatch",
                review.isbn,
                self._isbn,
            )
            raise ValidationError(
                "review.isbn",
                f"Review ISBN {review.isbn} does not match Book ISBN {self._isbn}.",
                ViolationKind.REFERENTIAL,
            )

        if any(existing.reviewer.is_same_person(review.reviewer) for existing in self._reviews):
            logger.info(
                "Rejected duplicate review by %s on book %s",
                review.reviewer.full_name,
                self._isbn,
            )
            raise ValidationError(
                "review",
                f"Reviewer {review.reviewer.full_name} has already submitted a review.",
                ViolationKind.UNIQUENESS,
            )

        self._reviews.append(review)
        logger.debug(
            "Added review by %s to book %s (%d total)",
            review.reviewer.full_name,
            self._isbn,
            len(self._reviews),
        )

    def __eq__(self, other: object) -> bool:
        """Two books are equal if they have the same ISBN."""
        if not isinstance(other, Book):
            return NotImplemented
        return self._isbn == other._isbn

    def __hash__(self) -> int:
        """Hash based on ISBN."""
        return hash(self._isbn)

    def __repr__(self) -> str:
        return (
            f"Book(isbn={self._isbn!r}, title={self._title!r}, "
            f"publish_year={self._publish_year!r}, author={self._author!r}, "
            f"genre={self._genre!r}, total_reviews={self.total_reviews})"
        )

    def __str__(self) -> str:
        return (
            f"{self._isbn},{self._title},{self._publish_year},"
            f"{self._author},{self._genre},{self.total_reviews}"
        )
