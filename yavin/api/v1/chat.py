"""
Tutor chat endpoint.
"""
from typing import Any

from fastapi import APIRouter

from yavin.core.exceptions import ValidationFailed
from yavin.schemas.engagement import ChatRequest, ChatResponse
from yavin.services.ai_service import ai_service

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
def chat(form: ChatRequest) -> Any:
    """
    Ask the AI tutor a question. Provider problems come back as a friendly reply.
    """
    message = form.message.strip()
    if not message:
        raise ValidationFailed("Message is required")
    return ChatResponse(response=ai_service.chat(message))
