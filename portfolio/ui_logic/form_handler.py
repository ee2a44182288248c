"""
Contact-form bookkeeping.

Tracks the current value of each contact-form field and the per-field error
messages shown next to them. Validation itself lives in `validators`; this
module only stores what the caller hands it.
"""

from dataclasses import dataclass, asdict
from typing import Dict
import logging

from .validators import FieldName

logger = logging.getLogger(__name__)


@dataclass
class FormFields:
    """Current contact-form values; every field starts empty."""
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""


class ContactFormHandler:
    """
    Owns the mutable contact-form state.

    Errors are kept as a mapping of field name -> message. A field with no
    entry is valid; clearing an error removes the key rather than storing "".
    """

    def __init__(self):
        self._fields = FormFields()
        self._errors: Dict[str, str] = {}
        self.is_submitting = False

    def update_field(self, field_name: str, value: str) -> bool:
        """Overwrite a field value.

        Returns:
            True if the field exists and was updated, False otherwise
        """
        field = FieldName.from_value(field_name)
        if field is None:
            logger.debug("Ignoring update for unknown field '%s'", field_name)
            return False
        setattr(self._fields, field.value, value)
        return True

    def get_field_value(self, field_name: str) -> str:
        field = FieldName.from_value(field_name)
        if field is None:
            return ""
        return getattr(self._fields, field.value) or ""

    def set_error(self, field_name: str, error_message: str) -> None:
        self._errors[field_name] = error_message

    def clear_error(self, field_name: str) -> None:
        self._errors.pop(field_name, None)

    def clear_all_errors(self) -> None:
        self._errors = {}

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_errors(self) -> Dict[str, str]:
        """Return a copy of the current error mapping."""
        return dict(self._errors)

    def reset_form(self) -> None:
        """Return every field to "" and drop all errors."""
        self._fields = FormFields()
        self.clear_all_errors()

    def get_form_data(self) -> Dict[str, str]:
        """Return a copy of the current field values."""
        return asdict(self._fields)
