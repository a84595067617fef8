from functools import lru_cache
import logging

from aham.analysis.ai_providers.base import AIService
from aham.analysis.ai_providers.openai import OpenAIAIService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _chatgpt() -> AIService:
    return OpenAIAIService()


def get_ai_service() -> AIService:
    """
    FastAPI dependency that returns the process-wide AI service implementation.
    """
    service = _chatgpt()
    logger.debug(f"Using AI service '{service.model_tag}'")
    return service
