# schemas.py
from typing import List, Optional
from pydantic import BaseModel, Field

from aham.entries.schemas import ReflectionAnswers


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class HistoryItem(BaseSchema):
    date: str
    mood: Optional[str] = None
    journal: Optional[str] = None
    reflections: ReflectionAnswers = Field(default_factory=ReflectionAnswers)


class PatternAnalysis(BaseSchema):
    analysis: Optional[str] = None
    inquiry_questions: List[str] = []


# LLM response validation model (keeps provider output separate from the API shape)
class PatternLLMResponse(BaseModel):
    analysis: str
    inquiryQuestions: List[str]


class TrendPoint(BaseSchema):
    date: str
    mood: Optional[str] = None
    mood_score: int
    sleep_hours: Optional[float] = None
