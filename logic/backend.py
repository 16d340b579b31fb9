import os
import re
import webbrowser
from typing import List, Optional, Tuple

from logic.mongo_db import MongoDB

DEFAULT_TITLE = "New Case"

_WHITESPACE = re.compile(r"\s+")
_NOT_SLUG = re.compile(r"[^a-z0-9-]")

# (button label, path template) for the pages of one case
CASE_PAGES = [
    ("Setup", "/c/{id}/setup"),
    ("Student", "/c/{id}"),
    ("Board", "/c/{id}/board"),
    ("Instructor", "/c/{id}/instructor"),
]


def slugify(raw: str) -> str:
    """Turn free text into a case id made of [a-z0-9-] only; may be empty."""
    slug = (raw or "").strip().lower()
    slug = _WHITESPACE.sub("-", slug)
    return _NOT_SLUG.sub("", slug)


def case_title(raw: str) -> str:
    return (raw or "").strip() or DEFAULT_TITLE


def normalize_email(raw: str) -> str:
    return (raw or "").strip().lower()


def case_links(case_id: str, base_url: Optional[str] = None) -> List[Tuple[str, str]]:
    base = (base_url or os.getenv("CASE_BOARD_BASE_URL", "http://localhost:3000")).rstrip("/")
    return [(label, base + path.format(id=case_id)) for label, path in CASE_PAGES]


def open_link(url: str) -> bool:
    return webbrowser.open(url)


def create_repository() -> MongoDB:
    db = MongoDB()
    db.ensure_indexes()
    return db
