"""
Framework-agnostic portfolio management.

This module owns the static portfolio content and the contact-form
submission flow:
- Projecting profile, skills and projects into display-ready dicts
- Validating single fields and whole forms
- Accepting a submission and remembering the last submitted values
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
import logging

from ..content_data import PortfolioContent, default_content
from .form_handler import FormFields
from .validators import FieldName, validate_field

logger = logging.getLogger(__name__)

SUBMISSION_SUCCESS_MESSAGE = "✨ Message sent! I'll get back to you within 24 hours."
DEFAULT_SCROLL_OFFSET = 60


@dataclass
class ValidationResult:
    """Outcome of validating a set of form fields."""
    is_valid: bool = True
    errors: Dict[str, str] = field(default_factory=dict)

    def add_error(self, field_name: str, message: str) -> None:
        self.errors[field_name] = message
        self.is_valid = False

    def to_dict(self) -> Dict[str, Any]:
        return {"is_valid": self.is_valid, "errors": dict(self.errors)}


@dataclass
class SubmissionResult:
    """Outcome of a form submission.

    A successful result carries `message`; a failed one carries `errors`.
    """
    success: bool
    message: Optional[str] = None
    errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "message": self.message}
        return {"success": False, "errors": dict(self.errors)}


class PortfolioManager:
    """
    Framework-agnostic portfolio manager.

    Holds read-only portfolio content plus the last successfully submitted
    contact-form values.
    """

    def __init__(self, content: Optional[PortfolioContent] = None):
        """Initialize the portfolio manager.

        Args:
            content: Portfolio content; the built-in content is used if omitted
        """
        self.content = content if content is not None else default_content()
        self._submitted = FormFields()

    def render_skills(self) -> List[Dict[str, str]]:
        return [{"icon": s.icon, "label": s.label} for s in self.content.skills]

    def render_projects(self) -> List[Dict[str, Any]]:
        return [
            {
                "icon": p.icon,
                "title": p.title,
                "description": p.description,
                "tags": list(p.tags),
            }
            for p in self.content.projects
        ]

    def get_about_data(self) -> Dict[str, Any]:
        profile = self.content.profile
        return {
            "name": profile.name,
            "initials": profile.initials,
            "title": profile.title,
            "bio": list(profile.bio),
        }

    def validate_field(self, field_name: str, value: str) -> str:
        """Validate one field; unknown field names are always valid."""
        return validate_field(field_name, value)

    def validate_form(self, form_inputs: Mapping[str, str]) -> ValidationResult:
        """Validate every field present in `form_inputs`.

        Args:
            form_inputs: Mapping of field name -> raw value

        Returns:
            ValidationResult with one error per invalid field
        """
        result = ValidationResult()
        for field_name, value in form_inputs.items():
            error = self.validate_field(field_name, value)
            if error:
                result.add_error(field_name, error)
        return result

    def submit_form(self, form_inputs: Mapping[str, str]) -> SubmissionResult:
        """Validate and accept a contact-form submission.

        Stored submission data only changes when every field is valid.
        """
        validation = self.validate_form(form_inputs)
        if not validation.is_valid:
            logger.debug("Form submission rejected: %s", ", ".join(validation.errors))
            return SubmissionResult(success=False, errors=validation.errors)

        known = {k: v for k, v in form_inputs.items() if FieldName.from_value(k) is not None}
        self._submitted = FormFields(**known)
        logger.info("Form submitted successfully from '%s' <%s>", self._submitted.name, self._submitted.email)
        return SubmissionResult(success=True, message=SUBMISSION_SUCCESS_MESSAGE)

    def get_submitted_data(self) -> Dict[str, str]:
        """Return a copy of the last accepted submission."""
        return {
            "name": self._submitted.name,
            "email": self._submitted.email,
            "phone": self._submitted.phone,
            "message": self._submitted.message,
        }

    def smooth_scroll_to(self, target_id: str, offset: int = DEFAULT_SCROLL_OFFSET) -> Dict[str, Any]:
        """Describe a smooth scroll to `target_id` for the rendering layer."""
        return {"target": target_id, "offset": offset, "behavior": "smooth"}
