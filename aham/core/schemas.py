from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True


class CreatedResponse(BaseModel):
    id: int


class CompletionUpdate(BaseModel):
    completed: bool
