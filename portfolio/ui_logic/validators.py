"""
Contact-form field validators.

Each validator is a pure function taking the raw field value and returning
an error message, or an empty string when the value is valid. There are no
cross-field rules; validity depends only on the string being checked.
"""

from enum import Enum
import re
from typing import Optional, Union


class FieldName(Enum):
    """Enumeration of the contact-form fields."""
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    MESSAGE = "message"

    @classmethod
    def from_value(cls, value: Union[str, "FieldName"]) -> Optional["FieldName"]:
        """Resolve a field name string to its enum member, or None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")

MIN_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10
MIN_MESSAGE_LENGTH = 20


def validate_name(value: str) -> str:
    """Require a name of at least two non-blank characters."""
    trimmed = value.strip()
    if not trimmed:
        return "Please enter your name"
    if len(trimmed) < MIN_NAME_LENGTH:
        return "Name must be at least 2 characters"
    return ""


def validate_email(value: str) -> str:
    """Require an address of the form ``local@domain.tld``.

    The pattern is matched against the raw value, so surrounding whitespace
    makes an otherwise valid address invalid.
    """
    if not value.strip():
        return "Email is required"
    # fullmatch: `$` alone would accept a trailing newline
    if not EMAIL_PATTERN.fullmatch(value):
        return "Please enter a valid email address"
    return ""


def validate_phone(value: str) -> str:
    """Optional field; when given it must be at least ten characters."""
    trimmed = value.strip()
    if trimmed and len(trimmed) < MIN_PHONE_LENGTH:
        return "Please enter a valid phone number"
    return ""


def validate_message(value: str) -> str:
    """Require a message of at least twenty non-blank characters."""
    trimmed = value.strip()
    if not trimmed:
        return "Message cannot be empty"
    if len(trimmed) < MIN_MESSAGE_LENGTH:
        return "Message should be at least 20 characters"
    return ""


def validate_field(field: Union[str, FieldName], value: str) -> str:
    """Validate a single field value.

    Args:
        field: Field name or ``FieldName`` member
        value: Raw field value

    Returns:
        Error message, or "" when valid. Unrecognized field names are
        always treated as valid.
    """
    field_name = FieldName.from_value(field)
    if field_name is None:
        return ""
    if field_name is FieldName.NAME:
        return validate_name(value)
    if field_name is FieldName.EMAIL:
        return validate_email(value)
    if field_name is FieldName.PHONE:
        return validate_phone(value)
    if field_name is FieldName.MESSAGE:
        return validate_message(value)
    raise AssertionError(f"Unhandled field: {field_name}")
