"""Schemas module - Import all schemas."""
from yavin.schemas.common import Message
from yavin.schemas.progress import (
    ProgressUpdate,
    ProgressEntry,
    ProgressResponse,
    QuizSubmission,
    QuizResponse,
)
from yavin.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserPublic,
    AuthResponse,
    CurrentUserResponse,
)
from yavin.schemas.badge import Badge, BadgeCheckRequest, BadgeCatalogResponse, BadgeCheckResponse
from yavin.schemas.certificate import CertificateResponse
from yavin.schemas.search import SearchResult, SearchResponse
from yavin.schemas.engagement import (
    NewsletterSubscription,
    FeedbackSubmission,
    ChatRequest,
    ChatResponse,
)

__all__ = [
    "Message",
    "ProgressUpdate",
    "ProgressEntry",
    "ProgressResponse",
    "QuizSubmission",
    "QuizResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserPublic",
    "AuthResponse",
    "CurrentUserResponse",
    "Badge",
    "BadgeCheckRequest",
    "BadgeCatalogResponse",
    "BadgeCheckResponse",
    "CertificateResponse",
    "SearchResult",
    "SearchResponse",
    "NewsletterSubscription",
    "FeedbackSubmission",
    "ChatRequest",
    "ChatResponse",
]
