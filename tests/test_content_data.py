import json
from pathlib import Path
import tempfile
import unittest

from portfolio.content_data import (
    DEFAULT_CONTENT_DATA,
    PortfolioContent,
    default_content,
    load_portfolio_content,
    parse_content_dict,
)
from portfolio.io_paths import CONTENT_DIR


class TestDefaultContent(unittest.TestCase):
    def test_default_profile(self):
        content = default_content()
        self.assertIsInstance(content, PortfolioContent)
        self.assertEqual(content.profile.name, "Breana Fulton")
        self.assertEqual(content.profile.initials, "BF")
        self.assertEqual(len(content.profile.bio), 2)

    def test_default_order(self):
        content = default_content()
        self.assertEqual(
            [s.label for s in content.skills],
            ["React", "UI/UX Design", "Node.js", "Databases", "Responsive", "Cloud Services", "DevOps", "TypeScript"],
        )
        self.assertEqual(content.projects[0].title, "MarketPlace Pro")
        self.assertEqual(content.projects[0].tags, ("React", "Socket.io", "Stripe", "MongoDB"))

    def test_records_are_immutable(self):
        content = default_content()
        with self.assertRaises(AttributeError):
            content.profile.name = "Someone Else"  # type: ignore[misc]


class TestContentLoader(unittest.TestCase):
    def _write_temp(self, text: str, suffix: str) -> Path:
        tmp = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
        tmp.write(text.encode("utf-8"))
        tmp.flush()
        tmp.close()
        return Path(tmp.name)

    def test_valid_yaml(self):
        p = self._write_temp(
            """
profile:
  name: Ada Lovelace
  initials: AL
  title: Analyst
  bio:
    - First paragraph.
skills:
  - icon: "🧮"
    label: Maths
projects:
  - emoji: "⚙️"
    title: Engine
    description: Analytical engine notes.
    tags: [Gears, Cards]
            """,
            ".yaml",
        )
        try:
            content = load_portfolio_content(p)
            self.assertEqual(content.profile.name, "Ada Lovelace")
            self.assertEqual(content.profile.bio, ("First paragraph.",))
            self.assertEqual(content.skills[0].label, "Maths")
            self.assertEqual(content.projects[0].icon, "⚙️")
            self.assertEqual(content.projects[0].tags, ("Gears", "Cards"))
        finally:
            p.unlink(missing_ok=True)

    def test_valid_json(self):
        p = self._write_temp(json.dumps(DEFAULT_CONTENT_DATA), ".json")
        try:
            self.assertEqual(load_portfolio_content(p), default_content())
        finally:
            p.unlink(missing_ok=True)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_portfolio_content(Path(tempfile.gettempdir()) / "does-not-exist-portfolio.yaml")

    def test_non_mapping_root(self):
        p = self._write_temp("- just\n- a list\n", ".yaml")
        try:
            with self.assertRaises(ValueError):
                load_portfolio_content(p)
        finally:
            p.unlink(missing_ok=True)

    def test_malformed_yaml(self):
        p = self._write_temp("profile: [unclosed\n", ".yaml")
        try:
            with self.assertRaisesRegex(ValueError, "Malformed content file"):
                load_portfolio_content(p)
        finally:
            p.unlink(missing_ok=True)

    def test_malformed_json(self):
        p = self._write_temp('{"profile": ', ".json")
        try:
            with self.assertRaisesRegex(ValueError, "Malformed content file"):
                load_portfolio_content(p)
        finally:
            p.unlink(missing_ok=True)

    def test_missing_profile_key(self):
        data = {"profile": {"name": "X", "initials": "X", "bio": []}, "skills": [], "projects": []}
        with self.assertRaisesRegex(ValueError, r"profile\.title"):
            parse_content_dict(data)

    def test_bad_tags_type(self):
        data = json.loads(json.dumps(DEFAULT_CONTENT_DATA))
        data["projects"][1]["tags"] = "React"
        with self.assertRaisesRegex(ValueError, r"projects\[1\]\.tags"):
            parse_content_dict(data)

    def test_shipped_example(self):
        content = load_portfolio_content(CONTENT_DIR / "example.yaml")
        self.assertEqual(content.profile.initials, "AL")
        self.assertEqual(len(content.skills), 2)

    def test_missing_skills_block(self):
        data = {"profile": DEFAULT_CONTENT_DATA["profile"], "projects": []}
        with self.assertRaisesRegex(ValueError, "skills"):
            parse_content_dict(data)


if __name__ == "__main__":
    unittest.main()
