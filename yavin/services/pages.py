"""
Lesson page rendering.
"""
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from yavin.core.catalog import SECTIONS
from yavin.core.config import settings
from yavin.models.progress import ProgressRecord
from yavin.schemas.progress import ProgressEntry
from yavin.schemas.user import UserPublic

FALLBACK_TEMPLATE = "lesson.html"

# page_id -> title
PAGES: Dict[str, str] = {
    "home": "Yavin – Understanding Artificial Intelligence",
    "foundations": "Foundations – Yavin",
    "learning": "Machine Learning – Yavin",
    "neural": "Neural Networks – Yavin",
    "deep": "Deep Learning – Yavin",
    "modern": "Modern AI – Yavin",
    "sequential": "Sequential Flow – Yavin",
    "ethics": "Ethics & Society – Yavin",
    "glossary": "Glossary – Yavin",
    "mission": "Our Mission – Yavin",
    "playground": "Code Playground – Yavin",
}


def build_page_context(
    page_id: str,
    title: str,
    user: Optional[UserPublic],
    progress: Iterable[ProgressRecord] = (),
) -> Dict[str, Any]:
    """Template context shared by every lesson page."""
    context: Dict[str, Any] = {
        "title": title,
        "page_id": page_id,
        "sections": SECTIONS,
        "is_logged_in": user is not None,
    }
    if user is None:
        return context

    progress_map = {
        record.section_id: ProgressEntry.model_validate(record).model_dump()
        for record in progress
    }
    completed_count = sum(1 for entry in progress_map.values() if entry["completed"])
    context.update(
        user=user.model_dump(mode="json"),
        progress=progress_map,
        completion_percentage=completed_count * 100 // len(SECTIONS),
    )
    return context


class PageRenderer:
    """Render lesson pages from the templates directory."""

    def __init__(self, templates_dir: str = settings.TEMPLATES_DIR):
        path = Path(templates_dir)
        if not path.is_dir():
            raise RuntimeError(f"Templates directory not found: {path}")
        self._env = Environment(
            loader=FileSystemLoader(path),
            autoescape=select_autoescape(["html", "xml"])
        )

    def render(self, page_id: str, context: Dict[str, Any]) -> str:
        """Use ``<page_id>.html`` when it exists, otherwise the generic lesson template."""
        template = self._env.select_template([f"{page_id}.html", FALLBACK_TEMPLATE])
        return template.render(**context)
