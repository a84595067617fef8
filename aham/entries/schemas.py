import json
import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class ReflectionAnswers(BaseModel):
    """Answers to the fixed daily reflection questions."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    worries: str = ""
    sadness: str = ""
    annoyance: str = ""
    body_needs: str = Field("", alias="bodyNeeds")
    loveliness: str = ""

    @classmethod
    def from_blob(cls, blob: Optional[str]) -> "ReflectionAnswers":
        """
        Decodes a stored reflection blob answer by answer. Missing, malformed
        or non-object blobs decode to an empty record. Within an object,
        null answers count as not supplied, numbers and booleans are kept as
        text, and nested values are dropped without touching the other answers.
        """
        if not blob:
            return cls()
        try:
            raw = json.loads(blob)
        except ValueError as e:
            logger.warning(f"Ignoring malformed reflection blob: {e}")
            return cls()
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring reflection blob: expected a JSON object, got {type(raw).__name__}")
            return cls()

        answers = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            value = raw.get(key, raw.get(name))
            if value is None:
                continue
            if isinstance(value, (dict, list)):
                logger.warning(f"Dropping non-text reflection answer '{key}'")
                continue
            answers[name] = value if isinstance(value, str) else json.dumps(value)
        return cls.model_validate(answers)

    def to_blob(self) -> str:
        """Encodes only the answers that were actually supplied."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class EntryUpsert(BaseSchema):
    date: str
    journal_text: Optional[str] = None
    mood: Optional[str] = None
    sleep_start: Optional[str] = None
    sleep_end: Optional[str] = None
    reflection_json: Optional[str] = None
    image_data: Optional[str] = None


class EntryBase(BaseSchema):
    id: int
    date: str
    journal_text: Optional[str] = None
    mood: Optional[str] = None
    sleep_start: Optional[str] = None
    sleep_end: Optional[str] = None
    reflection_json: Optional[str] = None
    image_data: Optional[str] = None
    reflection: ReflectionAnswers = Field(default_factory=ReflectionAnswers)

    @model_validator(mode="after")
    def _decode_reflection(self) -> "EntryBase":
        self.reflection = ReflectionAnswers.from_blob(self.reflection_json)
        return self


class EntryImageResponse(BaseModel):
    success: bool
    image_data: Optional[str] = None
