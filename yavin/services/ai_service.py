"""
Tutor chat backed by an OpenAI chat model through LangChain.

The assistant never fails loudly: an unconfigured key, a provider error or an
empty answer all come back as a short canned message.
"""
import logging

from langchain_core.messages import HumanMessage, SystemMessage

from yavin.core.llm_config import LLMFactory

logger = logging.getLogger(__name__)

TUTOR_SYSTEM_PROMPT = (
    "You are an AI education assistant on Yavin, a comprehensive AI learning platform. "
    "The user is learning about AI fundamentals, machine learning, neural networks, deep learning, "
    "modern AI systems, and ethics. Provide clear, educational, and encouraging responses. "
    "Keep answers concise but informative."
)

UNCONFIGURED_REPLY = (
    "I'm the Yavin AI assistant! Full AI answers are not enabled on this server yet. "
    "For now, I can help you navigate this educational platform. What would you like to learn about AI?"
)
FAILURE_REPLY = "I'm having trouble connecting. Please try again."
EMPTY_REPLY = "I couldn't process that. Please try rephrasing."


class AIService:
    """Thin wrapper around the chat model."""

    def __init__(self, temperature: float = 0.7):
        self.temperature = temperature
        self._llm = None

    def _get_llm(self):
        if self._llm is None:
            self._llm = LLMFactory.create_llm(temperature=self.temperature)
        return self._llm

    def chat(self, message: str) -> str:
        """
        Answer a learner's question.

        Args:
            message: The learner's question

        Returns:
            Assistant reply, or a canned message when the model is unavailable
        """
        if not LLMFactory.is_configured():
            return UNCONFIGURED_REPLY

        messages = [
            SystemMessage(content=TUTOR_SYSTEM_PROMPT),
            HumanMessage(content=message),
        ]
        try:
            response = self._get_llm().invoke(messages)
        except Exception as e:
            logger.warning(f"Chat model call failed: {e}")
            return FAILURE_REPLY

        content = response.content if isinstance(response.content, str) else ""
        return content.strip() or EMPTY_REPLY


ai_service = AIService()
