"""Task schemas for the HTTP boundary."""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class TaskCreate(BaseModel):
    """Body accepted by create and update. Every other field is server-owned."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str]
    completed: bool
    created_at: datetime
    updated_at: datetime
    user_id: str
