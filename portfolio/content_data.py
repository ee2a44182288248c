from __future__ import annotations

"""
Portfolio content: profile, skills and projects.

Responsibilities:
- Define the immutable records shown on the site (`Profile`, `Skill`, `Project`)
- Provide the built-in default content
- Load replacement content from a YAML or JSON document

Design choices:
- No silent defaults inside a loaded document; missing or mistyped keys
  raise `ValueError` naming the offending path
- Sequences are stored as tuples so loaded content cannot be mutated
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import json
import logging

import yaml

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Profile:
    name: str
    initials: str
    title: str
    bio: Tuple[str, ...]


@dataclass(frozen=True)
class Skill:
    icon: str
    label: str


@dataclass(frozen=True)
class Project:
    icon: str
    title: str
    description: str
    tags: Tuple[str, ...]


@dataclass(frozen=True)
class PortfolioContent:
    profile: Profile
    skills: Tuple[Skill, ...]
    projects: Tuple[Project, ...]


DEFAULT_CONTENT_DATA: Dict[str, Any] = {
    "profile": {
        "name": "Breana Fulton",
        "initials": "BF",
        "title": "Creative Developer & Designer",
        "bio": [
            "I build elegant digital experiences that combine beautiful design with powerful functionality. "
            "With a passion for clean code and user-centric design, I help brands tell their stories through "
            "innovative web applications.",
            "Specialized in modern web technologies and always learning. I believe great products come from "
            "understanding both the technical and human side of development.",
        ],
    },
    "skills": [
        {"icon": "⚛️", "label": "React"},
        {"icon": "🎨", "label": "UI/UX Design"},
        {"icon": "🚀", "label": "Node.js"},
        {"icon": "💾", "label": "Databases"},
        {"icon": "📱", "label": "Responsive"},
        {"icon": "☁️", "label": "Cloud Services"},
        {"icon": "🔧", "label": "DevOps"},
        {"icon": "🎯", "label": "TypeScript"},
    ],
    "projects": [
        {
            "icon": "🏪",
            "title": "MarketPlace Pro",
            "description": "Built a comprehensive marketplace platform connecting buyers and sellers with "
            "real-time chat, secure payments, and advanced search features.",
            "tags": ["React", "Socket.io", "Stripe", "MongoDB"],
        },
        {
            "icon": "🎵",
            "title": "SoundWave Studio",
            "description": "Developed a music streaming platform with personalized playlists, artist profiles, "
            "and collaborative playlist features for music lovers.",
            "tags": ["Next.js", "PostgreSQL", "AWS"],
        },
        {
            "icon": "🏃",
            "title": "FitTrack Pro",
            "description": "Created a comprehensive fitness tracking app with workout plans, nutrition tracking, "
            "and progress analytics for health enthusiasts.",
            "tags": ["React Native", "Firebase", "Charts.js"],
        },
        {
            "icon": "📚",
            "title": "LearnHub",
            "description": "Educational platform featuring interactive courses, quizzes, and progress tracking "
            "with gamification elements to enhance learning.",
            "tags": ["Vue.js", "Django", "Redis"],
        },
        {
            "icon": "🏡",
            "title": "RealEstate Finder",
            "description": "Property listing platform with virtual tours, mortgage calculators, and AI-powered "
            "recommendations for home buyers.",
            "tags": ["Angular", "Python", "Google Maps API"],
        },
        {
            "icon": "✈️",
            "title": "TravelBuddy",
            "description": "Trip planning application with itinerary management, expense splitting, and local "
            "recommendations for travelers worldwide.",
            "tags": ["React", "Express", "MongoDB"],
        },
    ],
}


def _require_str(block: Mapping[str, Any], key: str, where: str) -> str:
    if key not in block:
        raise ValueError(f"{where}.{key} is required")
    value = block[key]
    if not isinstance(value, str):
        raise ValueError(f"{where}.{key} must be a string, got {type(value).__name__}")
    return value


def _require_str_list(block: Mapping[str, Any], key: str, where: str) -> Tuple[str, ...]:
    if key not in block:
        raise ValueError(f"{where}.{key} is required")
    values = block[key]
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"{where}.{key} must be a list of strings")
    return tuple(values)


def _require_list_of_mappings(data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    rows = data.get(key)
    if rows is None:
        raise ValueError(f"'{key}' block is required")
    if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
        raise ValueError(f"'{key}' must be a list of mappings")
    return rows


def parse_content_dict(data: Mapping[str, Any]) -> PortfolioContent:
    """Build a `PortfolioContent` from a plain mapping.

    Expected layout mirrors `DEFAULT_CONTENT_DATA`: a `profile` mapping and
    `skills` / `projects` lists. Project icons may also be given as `emoji`.
    """
    if not isinstance(data, Mapping):
        raise ValueError("Portfolio content must be a mapping at top level")

    raw_profile = data.get("profile")
    if not isinstance(raw_profile, dict):
        raise ValueError("'profile' block is required and must be a mapping")
    profile = Profile(
        name=_require_str(raw_profile, "name", "profile"),
        initials=_require_str(raw_profile, "initials", "profile"),
        title=_require_str(raw_profile, "title", "profile"),
        bio=_require_str_list(raw_profile, "bio", "profile"),
    )

    skills = tuple(
        Skill(
            icon=_require_str(row, "icon", f"skills[{i}]"),
            label=_require_str(row, "label", f"skills[{i}]"),
        )
        for i, row in enumerate(_require_list_of_mappings(data, "skills"))
    )

    projects = []
    for i, row in enumerate(_require_list_of_mappings(data, "projects")):
        where = f"projects[{i}]"
        if "icon" not in row and "emoji" in row:
            row = {**row, "icon": row["emoji"]}
        projects.append(
            Project(
                icon=_require_str(row, "icon", where),
                title=_require_str(row, "title", where),
                description=_require_str(row, "description", where),
                tags=_require_str_list(row, "tags", where),
            )
        )

    return PortfolioContent(profile=profile, skills=skills, projects=tuple(projects))


def default_content() -> PortfolioContent:
    """Return the built-in portfolio content."""
    return parse_content_dict(DEFAULT_CONTENT_DATA)


def _load_raw_content(path: Path) -> Dict[str, Any]:
    """Load YAML/JSON as a plain dict; ensure the root is a mapping."""
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            # YAML for .yaml/.yml and unknown extensions
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Malformed content file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Content file must deserialize to a mapping/dictionary at top level")
    return data


def load_portfolio_content(path: Path) -> PortfolioContent:
    """Load and validate portfolio content from a YAML or JSON file.

    Parameters
    ----------
    path : Path
        Path to the content document

    Returns
    -------
    PortfolioContent
        Validated, immutable content bundle
    """
    path = Path(path)
    content = parse_content_dict(_load_raw_content(path))
    log.info(
        "Loaded portfolio content for '%s' from %s: %d skills, %d projects",
        content.profile.name,
        path,
        len(content.skills),
        len(content.projects),
    )
    return content
