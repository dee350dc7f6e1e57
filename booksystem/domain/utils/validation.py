"""
Field-level checks shared by the domain entities.

Each helper either returns the (normalized) value or raises a
ValidationError naming the field that failed.
"""

import re
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..exceptions import ValidationError, ViolationKind

E = TypeVar("E", bound=Enum)

URL_PATTERN: re.Pattern[str] = re.compile(
    r"(?:https?://)?(?:www\.)?[a-zA-Z0-9]+\.\w{2,}(?!\.)"
)
"""
Loose URL shape: optional scheme, optional ``www.``, a host label and a
top-level label of 2+ characters. Searched anywhere in the value, so bare
domains such as ``example.com`` are accepted.
"""

EMAIL_PATTERN: re.Pattern[str] = re.compile(r"\A[^@\s]+@[^@\s]+\.[^@\s]+\Z")
"""Loose ``local@domain.tld`` shape, anchored on both ends."""


def require_text(value: Optional[str], field: str, label: str) -> str:
    """
    Return ``value`` stripped of surrounding whitespace.

    Raises:
        ValidationError: If value is None, not a string, empty, or whitespace-only.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(
            field,
            f"{label} cannot be None, empty, or whitespace.",
            ViolationKind.REQUIRED,
        )
    if not isinstance(value, str):
        raise ValidationError(
            field,
            f"{label} must be a string, got {type(value).__name__}.",
            ViolationKind.FORMAT,
        )
    return value.strip()


def require_reference(value: Any, field: str, message: str) -> Any:
    """Return ``value`` unchanged, raising if it is None."""
    if value is None:
        raise ValidationError(field, message, ViolationKind.REQUIRED)
    return value


def require_shape(value: str, pattern: re.Pattern[str], field: str, message: str) -> str:
    """Return ``value`` if ``pattern`` is found in it."""
    if pattern.search(value) is None:
        raise ValidationError(field, message, ViolationKind.FORMAT)
    return value


def require_member(value: Any, enum_cls: Type[E], field: str) -> E:
    """
    Resolve ``value`` to a member of ``enum_cls``.

    Accepts a member, a member value (``"ScienceFiction"``) or a member
    name (``"SCIENCE_FICTION"``).
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str) and value in enum_cls.__members__:
        return enum_cls[value]

    allowed = ", ".join(member.value for member in enum_cls)
    raise ValidationError(
        field,
        f"{enum_cls.__name__} must be one of {allowed}, got {value!r}.",
        ViolationKind.FORMAT,
    )
