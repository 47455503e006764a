"""
Todos Router - per-user todo endpoints

The acting user comes from the `username` header.
"""
from typing import List, Tuple

from fastapi import APIRouter, Depends, Response

from auth import get_current_user, get_owned_todo, get_todo_service
from models.todo import Todo, TodoRequest
from models.user import User
from services.todo_service import TodoService
from utils.responses import log_endpoint_event

# Create todos router
todos_router = APIRouter(prefix="/todos", tags=["todos"])


@todos_router.get("", response_model=List[Todo])
async def list_todos(
    user: User = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """Return the acting user's todos in insertion order."""
    return todo_service.list_todos(user)


@todos_router.post("", status_code=201, response_model=Todo)
async def create_todo(
    request: TodoRequest,
    user: User = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """Create a todo. Free plan users are capped at FREE_PLAN_TODO_LIMIT todos."""
    todo = await todo_service.create_todo(user, request.title, request.deadline)
    log_endpoint_event("POST /todos", user.username, "success", {"todo_id": todo.id})
    return todo


@todos_router.put("/{id}", response_model=Todo)
async def update_todo(
    request: TodoRequest,
    owned: Tuple[User, Todo] = Depends(get_owned_todo),
    todo_service: TodoService = Depends(get_todo_service),
):
    user, todo = owned
    todo = await todo_service.update_todo(user, todo, request.title, request.deadline)
    log_endpoint_event("PUT /todos/{id}", user.username, "success", {"todo_id": todo.id})
    return todo


@todos_router.patch("/{id}/done", response_model=Todo)
async def mark_todo_done(
    owned: Tuple[User, Todo] = Depends(get_owned_todo),
    todo_service: TodoService = Depends(get_todo_service),
):
    """Mark a todo done. Calling it again is a no-op."""
    user, todo = owned
    todo = await todo_service.mark_done(user, todo)
    log_endpoint_event("PATCH /todos/{id}/done", user.username, "success", {"todo_id": todo.id})
    return todo


@todos_router.delete("/{id}", status_code=204)
async def delete_todo(
    owned: Tuple[User, Todo] = Depends(get_owned_todo),
    todo_service: TodoService = Depends(get_todo_service),
):
    user, todo = owned
    await todo_service.delete_todo(user, todo.id)
    log_endpoint_event("DELETE /todos/{id}", user.username, "success", {"todo_id": todo.id})
    return Response(status_code=204)
