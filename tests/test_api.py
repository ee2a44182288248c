"""Tests for the PortfolioAPI facade."""

from unittest.mock import Mock

from portfolio.api import PortfolioAPI, create_portfolio_api
from portfolio.ui_logic import ContactFormHandler, NavigationManager, PortfolioManager


def _fill(api, form):
    for name, value in form.items():
        api.update_form_field(name, value)


class TestContent:
    def test_about_skills_projects(self, api):
        assert api.get_about_section()["name"] == "Breana Fulton"
        assert api.get_skills()[0] == {"icon": "⚛️", "label": "React"}
        assert api.get_projects()[-1]["title"] == "TravelBuddy"


class TestNavigation:
    def test_navigate_to(self, api):
        assert api.navigate_to("work") == {"success": True, "section": "work"}
        assert api.get_current_section() == "work"

    def test_navigate_to_invalid(self, api):
        assert api.navigate_to("invalid") == {"success": False, "message": "Section not found"}
        assert api.get_current_section() == "about"


class TestUpdateFormField:
    def test_invalid_value_sets_error(self, api):
        assert api.update_form_field("name", "B") is False
        assert api.get_form_errors() == {"name": "Name must be at least 2 characters"}
        assert api.get_form_data()["name"] == "B"

    def test_valid_value_clears_error(self, api):
        api.update_form_field("name", "B")

        assert api.update_form_field("name", "Breana Fulton") is True
        assert api.get_form_errors() == {}

    def test_unknown_field_returns_false_without_error(self, api):
        assert api.update_form_field("company", "Acme") is False
        assert api.get_form_errors() == {}
        assert "company" not in api.get_form_data()

    def test_optional_phone(self, api):
        assert api.update_form_field("phone", "") is True
        assert api.update_form_field("phone", "123") is False
        assert api.get_form_errors() == {"phone": "Please enter a valid phone number"}


class TestSubmitContactForm:
    def test_success_resets_form(self, api, valid_form):
        _fill(api, valid_form)

        result = api.submit_contact_form()

        assert result == {"success": True, "message": "✨ Message sent! I'll get back to you within 24 hours."}
        assert api.get_form_data() == {"name": "", "email": "", "phone": "", "message": ""}
        assert api.get_form_errors() == {}
        assert api.portfolio.get_submitted_data() == valid_form

    def test_failure_copies_errors(self, api):
        api.update_form_field("name", "Breana Fulton")

        result = api.submit_contact_form()

        assert result["success"] is False
        assert set(result["errors"]) == {"email", "message"}
        assert api.get_form_errors() == result["errors"]
        assert api.get_form_data()["name"] == "Breana Fulton"

    def test_errors_returned_are_copies(self, api):
        api.submit_contact_form()

        api.get_form_errors().clear()
        assert api.get_form_errors()

    def test_walkthrough(self, api):
        api.update_form_field("name", "B")
        assert "name" in api.get_form_errors()
        api.update_form_field("name", "Breana Fulton")
        assert api.get_form_errors() == {}
        api.update_form_field("email", "invalid-email")
        assert api.get_form_errors() == {"email": "Please enter a valid email address"}
        api.update_form_field("email", "breana@example.com")
        api.update_form_field("message", "This is a test message that is long enough to pass validation requirements.")

        assert api.submit_contact_form()["success"] is True


class TestConstruction:
    def test_instances_do_not_share_state(self):
        first = create_portfolio_api()
        second = create_portfolio_api()

        first.navigate_to("contact")
        first.update_form_field("name", "B")

        assert second.get_current_section() == "about"
        assert second.get_form_errors() == {}

    def test_injected_managers_are_used(self):
        portfolio = Mock(spec=PortfolioManager)
        portfolio.validate_field.return_value = ""
        api = PortfolioAPI(portfolio, NavigationManager(), ContactFormHandler())

        assert api.update_form_field("email", "anything") is True
        portfolio.validate_field.assert_called_once_with("email", "anything")
