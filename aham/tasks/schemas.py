from typing import Optional
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class TaskBase(BaseSchema):
    id: int
    date: Optional[str] = None
    title: Optional[str] = None
    completed: bool = False


class TaskCreate(BaseSchema):
    date: str
    title: str
