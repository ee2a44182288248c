"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo package layout like:
    from portfolio.ui_logic import PortfolioManager

Without relying on external environment variables.
"""

import os
import sys

import pytest

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


VALID_FORM = {
    "name": "Breana Fulton",
    "email": "breana@example.com",
    "phone": "",
    "message": "This is a test message that is long enough to pass validation requirements.",
}


@pytest.fixture
def valid_form():
    """A fresh copy of a fully valid contact form."""
    return dict(VALID_FORM)


@pytest.fixture
def api():
    """A freshly constructed facade with the built-in content."""
    from portfolio.api import create_portfolio_api

    return create_portfolio_api()
