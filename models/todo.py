"""
Todo models
"""
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    deadline: datetime
    done: bool = False
    created_at: datetime = Field(default_factory=_utcnow)


class TodoRequest(BaseModel):
    """Body for POST /todos and PUT /todos/{id}"""
    title: str
    deadline: str
