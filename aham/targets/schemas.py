from typing import Optional
from pydantic import BaseModel, Field


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class TargetBase(BaseSchema):
    id: int
    type: Optional[str] = None
    title: Optional[str] = None
    completed: bool = False
    period_key: Optional[str] = None


class TargetCreate(BaseSchema):
    type: str = Field(..., description="daily | weekly | monthly")
    title: str
    period_key: str = Field(..., description="Opaque key of the day, week or month the target belongs to.")
