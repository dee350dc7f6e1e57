"""
Value objects for the domain layer.

Value objects are immutable objects that describe the people around a
book. They validate and normalize their fields once, at construction,
and cannot be changed afterwards.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import ValidationError, ViolationKind
from .utils.validation import (
    EMAIL_PATTERN,
    URL_PATTERN,
    require_shape,
    require_text,
)

DEFAULT_ORGANIZATION = "Independent"
"""Organization recorded for reviewers who do not name one"""


@dataclass(frozen=True)
class Author:
    """
    The person who wrote a book.

    A Book holds its Author by reference; the same Author may be shared
    by several books and is never modified by them.
    """

    first_name: str
    """Given name"""

    last_name: str
    """Family name"""

    contact_url: str
    """Personal or publisher web address (loose URL shape)"""

    resident_city: str
    """City the author lives in"""

    resident_country: str
    """Country the author lives in"""

    def __post_init__(self) -> None:
        """Validate and trim every field."""
        first_name = require_text(self.first_name, "first_name", "First name")
        last_name = require_text(self.last_name, "last_name", "Last name")
        contact_url = require_text(self.contact_url, "contact_url", "Contact URL")
        resident_city = require_text(self.resident_city, "resident_city", "Resident city")
        resident_country = require_text(
            self.resident_country, "resident_country", "Resident country"
        )

        require_shape(contact_url, URL_PATTERN, "contact_url", "Invalid URL format.")

        # Frozen dataclass: normalized values have to bypass __setattr__.
        object.__setattr__(self, "first_name", first_name)
        object.__setattr__(self, "last_name", last_name)
        object.__setattr__(self, "contact_url", contact_url)
        object.__setattr__(self, "resident_city", resident_city)
        object.__setattr__(self, "resident_country", resident_country)

    def __str__(self) -> str:
        return ",".join(
            [
                self.first_name,
                self.last_name,
                self.contact_url,
                self.resident_city,
                self.resident_country,
            ]
        )


@dataclass(frozen=True)
class Reviewer:
    """
    Someone who submits reviews.

    Two reviewers with the same first and last name are treated as the
    same person when a book checks for duplicate reviews, even if their
    emails differ.
    """

    first_name: str
    """Given name"""

    last_name: str
    """Family name"""

    email: str
    """Contact email (loose ``local@domain.tld`` shape)"""

    organization: Optional[str] = None
    """Publication or employer; ``"Independent"`` when not given"""

    def __post_init__(self) -> None:
        """Validate and trim fields, defaulting the organization."""
        first_name = require_text(self.first_name, "first_name", "First name")
        last_name = require_text(self.last_name, "last_name", "Last name")
        email = require_text(self.email, "email", "Email")

        require_shape(email, EMAIL_PATTERN, "email", "Invalid email format.")

        if self.organization is None or (
            isinstance(self.organization, str) and not self.organization.strip()
        ):
            organization = DEFAULT_ORGANIZATION
        elif not isinstance(self.organization, str):
            raise ValidationError(
                "organization",
                f"Organization must be a string, got {type(self.organization).__name__}.",
                ViolationKind.FORMAT,
            )
        else:
            organization = self.organization.strip()

        object.__setattr__(self, "first_name", first_name)
        object.__setattr__(self, "last_name", last_name)
        object.__setattr__(self, "email", email)
        object.__setattr__(self, "organization", organization)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def identity_key(self) -> Tuple[str, str]:
        """The (first_name, last_name) pair used for duplicate detection."""
        return (self.first_name, self.last_name)

    def is_same_person(self, other: "Reviewer") -> bool:
        """Exact, case-sensitive comparison of name pairs."""
        return self.identity_key == other.identity_key

    def __str__(self) -> str:
        return ",".join([self.first_name, self.last_name, self.email, self.organization])
