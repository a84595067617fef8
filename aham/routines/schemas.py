from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class RoutineTemplateTaskBase(BaseSchema):
    id: int
    template_id: Optional[int] = None
    title: Optional[str] = None


class RoutineTemplateBase(BaseSchema):
    id: int
    name: Optional[str] = None
    tasks: List[RoutineTemplateTaskBase] = []


class RoutineTemplateCreate(BaseSchema):
    name: str
    tasks: List[str] = []


class ApplyTemplateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    template_id: int = Field(..., alias="templateId")
