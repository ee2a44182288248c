"""Portfolio site source package.

Exports the facade and content types for convenient imports.
"""

from .api import PortfolioAPI, create_portfolio_api
from .content_data import (
    PortfolioContent,
    Profile,
    Project,
    Skill,
    default_content,
    load_portfolio_content,
)

__all__ = [
    "PortfolioAPI",
    "create_portfolio_api",
    "PortfolioContent",
    "Profile",
    "Project",
    "Skill",
    "default_content",
    "load_portfolio_content",
]
