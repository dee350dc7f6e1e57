"""
Errors raised by the domain layer.
"""

from enum import Enum


class ViolationKind(Enum):
    """Which kind of rule an invalid input broke."""

    REQUIRED = "required"
    """A string was None/empty/whitespace, or a required reference was None"""

    FORMAT = "format"
    """A value did not have the expected shape or type (URL, email, enum member)"""

    RANGE = "range"
    """A number was outside its allowed range"""

    REFERENTIAL = "referential"
    """A review pointed at a different book than the one it was attached to"""

    UNIQUENESS = "uniqueness"
    """A reviewer tried to review the same book twice"""


class ValidationError(ValueError):
    """
    Raised when an entity is constructed or mutated with invalid data.

    Carries the logical name of the offending field so callers can tell
    failures apart without parsing the message.
    """

    def __init__(self, field: str, reason: str, kind: ViolationKind) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason
        self.kind = kind

    def __reduce__(self):
        # Rebuild from all three fields; self.args only holds the reason.
        return (type(self), (self.field, self.reason, self.kind))

    def __repr__(self) -> str:
        return (
            f"ValidationError(field={self.field!r}, reason={self.reason!r}, "
            f"kind={self.kind.name})"
        )
