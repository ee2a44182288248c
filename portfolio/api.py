from __future__ import annotations

"""Facade wiring the portfolio, navigation and contact-form managers.

A host rendering layer talks to a single `PortfolioAPI` instance. The
instance is constructed explicitly (see `create_portfolio_api`) so each
session or test gets its own state; nothing here is module-global.
"""

from typing import Any, Dict, List, Optional

import logging

from .content_data import PortfolioContent
from .ui_logic import ContactFormHandler, NavigationManager, PortfolioManager

log = logging.getLogger(__name__)


class PortfolioAPI:
    """Externally visible surface of the portfolio site logic."""

    def __init__(
        self,
        portfolio: PortfolioManager,
        navigation: NavigationManager,
        contact_form: ContactFormHandler,
    ) -> None:
        self.portfolio = portfolio
        self.navigation = navigation
        self.contact_form = contact_form

    def get_about_section(self) -> Dict[str, Any]:
        return self.portfolio.get_about_data()

    def get_skills(self) -> List[Dict[str, str]]:
        return self.portfolio.render_skills()

    def get_projects(self) -> List[Dict[str, Any]]:
        return self.portfolio.render_projects()

    def navigate_to(self, section_id: str) -> Dict[str, Any]:
        return self.navigation.navigate_to_section(section_id).to_dict()

    def update_form_field(self, field_name: str, value: str) -> bool:
        """Store a field value and refresh its error entry.

        Returns True when the field is known and its new value is valid.
        Unknown field names are ignored and never produce an error entry.
        """
        if not self.contact_form.update_field(field_name, value):
            return False

        error = self.portfolio.validate_field(field_name, value)
        if error:
            self.contact_form.set_error(field_name, error)
        else:
            self.contact_form.clear_error(field_name)
        return not error

    def submit_contact_form(self) -> Dict[str, Any]:
        """Submit the current form values.

        On success the form is reset; on failure every returned error is
        copied into the form's error map.
        """
        result = self.portfolio.submit_form(self.contact_form.get_form_data())
        if result.success:
            self.contact_form.reset_form()
            return result.to_dict()

        for field_name, message in result.errors.items():
            self.contact_form.set_error(field_name, message)
        log.debug("Contact form has %d invalid field(s)", len(result.errors))
        return result.to_dict()

    def get_form_errors(self) -> Dict[str, str]:
        return self.contact_form.get_errors()

    def get_form_data(self) -> Dict[str, str]:
        return self.contact_form.get_form_data()

    def get_current_section(self) -> str:
        return self.navigation.get_current_section()


def create_portfolio_api(content: Optional[PortfolioContent] = None) -> PortfolioAPI:
    """Build a `PortfolioAPI` with fresh managers.

    Args:
        content: Portfolio content; the built-in content is used if omitted
    """
    return PortfolioAPI(
        portfolio=PortfolioManager(content),
        navigation=NavigationManager(),
        contact_form=ContactFormHandler(),
    )
