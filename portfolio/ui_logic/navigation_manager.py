"""
In-memory section navigation for the portfolio page.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class SectionType(Enum):
    """Enumeration of navigable page sections, in page order."""
    ABOUT = "about"
    WORK = "work"
    CONTACT = "contact"


@dataclass(frozen=True)
class NavigationResult:
    success: bool
    section: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "section": self.section}
        return {"success": False, "message": self.message}


class NavigationManager:
    """
    Tracks the current page section.

    The current section is always one of `SectionType`; requests for any
    other id are rejected and leave it unchanged.
    """

    def __init__(self):
        self._sections = [s.value for s in SectionType]
        self._current = SectionType.ABOUT

    def navigate_to_section(self, section_id: str) -> NavigationResult:
        try:
            section = SectionType(section_id)
        except ValueError:
            logger.debug("Rejected navigation to unknown section '%s'", section_id)
            return NavigationResult(success=False, message="Section not found")
        self._current = section
        return NavigationResult(success=True, section=section.value)

    def get_current_section(self) -> str:
        return self._current.value

    def get_all_sections(self) -> List[str]:
        return list(self._sections)
