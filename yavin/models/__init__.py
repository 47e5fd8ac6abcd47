"""Models module - Import all models here so metadata is complete."""
from yavin.db.base import Base
from yavin.models.user import User
from yavin.models.progress import ProgressRecord
from yavin.models.achievement import AchievementGrant
from yavin.models.engagement import NewsletterSubscriber, Feedback

__all__ = ["Base", "User", "ProgressRecord", "AchievementGrant", "NewsletterSubscriber", "Feedback"]
