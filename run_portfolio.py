#!/usr/bin/env python3
from __future__ import annotations

"""
Command-line runner for the portfolio site logic.

Responsibilities:
- Configure logging to both console and `logs/run.log`
- Load the built-in content, or a YAML/JSON content file via `--content`
- Optionally navigate to a section before printing
- Print the about, skills and projects data as JSON
- With `--demo`, replay the contact-form walkthrough:
  * a too-short name, then a valid name
  * an invalid email, then a valid email
  * a long enough message, then submit
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from portfolio.api import PortfolioAPI, create_portfolio_api
from portfolio.content_data import load_portfolio_content
from portfolio.io_paths import CONTENT_DIR, LOGS_DIR
from portfolio.utils_logging import configure_logging

DEMO_MESSAGE = "This is a test message that is long enough to pass validation requirements."


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for the runner."""
    p = argparse.ArgumentParser(description="Portfolio site – content and contact-form runner")
    p.add_argument(
        "--content",
        type=str,
        help=f"Path to a content YAML/JSON file, or a file name under '{CONTENT_DIR.name}/'",
    )
    p.add_argument("--section", type=str, help="Section to navigate to before printing (about, work, contact)")
    p.add_argument("--demo", action="store_true", help="Replay the contact-form walkthrough")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--log-dir", type=str, default=str(LOGS_DIR), help="Directory for run.log")
    return p.parse_args(argv)


def _resolve_content_path(content: str) -> Path:
    """Resolve `--content` to a file, falling back to the `content/` directory."""
    path = Path(content)
    if path.exists():
        return path
    candidate = CONTENT_DIR / content
    if candidate.exists():
        return candidate
    return path


def run_demo(api: PortfolioAPI) -> List[Dict[str, Any]]:
    """Walk the contact form through its error and success paths.

    Returns one record per step with the step label and its outcome.
    """
    steps: List[Dict[str, Any]] = []

    api.update_form_field("name", "B")
    steps.append({"step": "Short name error", "errors": api.get_form_errors()})

    api.update_form_field("name", "Breana Fulton")
    steps.append({"step": "Valid name, errors cleared", "errors": api.get_form_errors()})

    api.update_form_field("email", "invalid-email")
    steps.append({"step": "Invalid email error", "errors": api.get_form_errors()})

    api.update_form_field("email", "breana@example.com")
    api.update_form_field("message", DEMO_MESSAGE)
    steps.append({"step": "Form submission result", "result": api.submit_contact_form()})
    return steps


def _dump(label: str, payload: Any) -> None:
    print(f"\n{label}:")
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(Path(args.log_dir), debug=args.debug)
    log = logging.getLogger("runner")

    content = None
    if args.content:
        content_path = _resolve_content_path(args.content)
        try:
            content = load_portfolio_content(content_path)
        except (FileNotFoundError, ValueError) as e:
            log.error("Could not load content from %s: %s", content_path, e)
            return 1

    api = create_portfolio_api(content)
    log.info("Portfolio system initialized for '%s'", api.get_about_section()["name"])

    if args.section:
        nav = api.navigate_to(args.section)
        if not nav["success"]:
            log.error("Cannot navigate to '%s': %s", args.section, nav["message"])
            return 1
        log.info("Current section: %s", api.get_current_section())

    print("=== Portfolio System Initialized ===")
    _dump("About Section", api.get_about_section())
    _dump("Skills", api.get_skills())
    _dump("Projects", api.get_projects())

    if args.demo:
        print("\n=== Form Validation Examples ===")
        for step in run_demo(api):
            label = step.pop("step")
            _dump(label, step)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
