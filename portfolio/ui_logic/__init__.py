"""
Framework-agnostic business logic for the portfolio site.

The logic is independent of any UI framework and can back any frontend:
- Field validators for the contact form
- Contact-form bookkeeping (values and per-field errors)
- Portfolio content projection and form submission
- In-memory section navigation
"""

from .form_handler import ContactFormHandler, FormFields
from .navigation_manager import NavigationManager, NavigationResult, SectionType
from .portfolio_manager import PortfolioManager, SubmissionResult, ValidationResult
from .validators import FieldName

__all__ = [
    "ContactFormHandler",
    "FormFields",
    "NavigationManager",
    "NavigationResult",
    "SectionType",
    "PortfolioManager",
    "SubmissionResult",
    "ValidationResult",
    "FieldName",
]
