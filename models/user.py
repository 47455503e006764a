import uuid
from typing import List

from pydantic import BaseModel, Field

from models.todo import Todo


class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    username: str
    pro: bool = False
    todos: List[Todo] = Field(default_factory=list)


class CreateUserRequest(BaseModel):
    name: str
    username: str
