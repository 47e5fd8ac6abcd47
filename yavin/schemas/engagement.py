"""
Pydantic schemas for newsletter, feedback and chat.
"""
from typing import Optional

from pydantic import BaseModel


class NewsletterSubscription(BaseModel):
    email: str
    source: Optional[str] = None


class FeedbackSubmission(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    rating: int
    message: str
    page_url: Optional[str] = None


class ChatRequest(BaseModel):
    message: str = ""


class ChatResponse(BaseModel):
    success: bool = True
    response: str
