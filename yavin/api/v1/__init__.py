"""API v1 router."""
from fastapi import APIRouter

from yavin.api.v1 import auth, badges, certificate, chat, engagement, progress, search

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(progress.router, tags=["Progress"])
api_router.include_router(badges.router, prefix="/badges", tags=["Badges"])
api_router.include_router(certificate.router, prefix="/certificate", tags=["Certificate"])
api_router.include_router(search.router, prefix="/search", tags=["Search"])
api_router.include_router(engagement.router, tags=["Engagement"])
api_router.include_router(chat.router, tags=["Chat"])
