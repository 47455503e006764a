import asyncio
from typing import Dict

from fastapi import Request

from models.user import User


class InMemoryStore:
    """
    Process-wide user/todo store.

    Users are keyed by id with a secondary index from username to id.
    Dicts keep insertion order, so iteration follows registration order.
    All check-then-mutate sequences run under `lock`.
    """

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.usernames: Dict[str, str] = {}
        self.lock = asyncio.Lock()


def init_store(app) -> InMemoryStore:
    """
    Attach a fresh empty store to the application.
    This should be called once when the app is created.
    """
    store = InMemoryStore()
    app.state.store = store
    return store


async def get_store(request: Request) -> InMemoryStore:
    """
    Dependency function that yields the application's store.
    Use this in FastAPI route dependencies to reach users and todos.

    Example:
        @router.get("/todos")
        async def list_todos(store: InMemoryStore = Depends(get_store)):
            pass
    """
    return request.app.state.store
