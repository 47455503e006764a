"""
Request resolution dependencies

The acting user is identified by the trusted `username` header; no
credential is verified. Each dependency returns the resolved entity or
raises a TodoServiceError that main.py renders as {"error": ...}.
"""

import logging
from typing import Optional, Tuple

from fastapi import Depends, Header

from database import InMemoryStore, get_store
from models.todo import Todo
from models.user import User
from services.todo_service import TodoService
from services.user_service import UserService
from utils.validators import ensure_valid_id

logger = logging.getLogger(__name__)


def get_user_service(store: InMemoryStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_todo_service(store: InMemoryStore = Depends(get_store)) -> TodoService:
    return TodoService(store)


# Dependency for todo routes
async def get_current_user(
    username: Optional[str] = Header(None),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """
    Dependency function to get the acting user from the `username` header.
    A missing header resolves like an unknown username.
    """
    return user_service.get_user_by_username(username)


async def get_user_from_path(
    id: str,
    user_service: UserService = Depends(get_user_service),
) -> User:
    """Resolve /users/{id}; malformed ids fail before any lookup."""
    return user_service.get_user(id)


async def get_owned_todo(
    id: str,
    username: Optional[str] = Header(None),
    user_service: UserService = Depends(get_user_service),
    todo_service: TodoService = Depends(get_todo_service),
) -> Tuple[User, Todo]:
    """
    Resolve /todos/{id} for the acting user.

    Order: id format, then user from header, then the todo inside that
    user's sequence.
    """
    ensure_valid_id(id)
    user = user_service.get_user_by_username(username)
    todo = todo_service.get_todo(user, id)
    return user, todo
