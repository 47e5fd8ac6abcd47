"""
HTML lesson pages.
"""
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from yavin.core.dependencies import get_optional_user
from yavin.db.base import get_db
from yavin.models.user import User
from yavin.schemas.user import UserPublic
from yavin.services.pages import PAGES, PageRenderer, build_page_context
from yavin.services.progress import list_progress

router = APIRouter()


@lru_cache
def get_renderer() -> PageRenderer:
    return PageRenderer()


def _page_endpoint(page_id: str, title: str):
    def render_page(
        db: Session = Depends(get_db),
        current_user: Optional[User] = Depends(get_optional_user),
        renderer: PageRenderer = Depends(get_renderer),
    ) -> HTMLResponse:
        profile = UserPublic.model_validate(current_user) if current_user else None
        progress = list_progress(db, current_user.id) if current_user else []
        context = build_page_context(page_id, title, profile, progress)
        return HTMLResponse(renderer.render(page_id, context))

    render_page.__name__ = f"{page_id}_page"
    return render_page


for _page_id, _title in PAGES.items():
    _path = "/" if _page_id == "home" else f"/{_page_id}"
    router.add_api_route(
        _path,
        _page_endpoint(_page_id, _title),
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
    )
