"""
Domain utilities module.

Provides the field checks shared by the catalog entities.
"""

from .validation import (
    URL_PATTERN,
    EMAIL_PATTERN,
    require_text,
    require_reference,
    require_shape,
    require_member,
)

__all__ = [
    "URL_PATTERN",
    "EMAIL_PATTERN",
    "require_text",
    "require_reference",
    "require_shape",
    "require_member",
]
