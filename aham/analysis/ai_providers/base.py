from abc import ABC, abstractmethod
from typing import List, Optional

from aham.analysis.schemas import HistoryItem, PatternAnalysis


class AIService(ABC):
    """
    External generative-AI collaborator.

    Implementations make a single attempt per call and return None on any
    failure; they never raise into the request handler.
    """

    model_tag: str

    @abstractmethod
    def generate_image(self, summary: str, mood: Optional[str], completed_tasks: List[str]) -> Optional[str]:
        """Returns a `data:image/png;base64,...` string, or None."""

    @abstractmethod
    def analyze_patterns(self, history: List[HistoryItem]) -> Optional[PatternAnalysis]:
        """Returns a short narrative and a few self-inquiry questions, or None."""
