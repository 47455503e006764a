"""
Todo Service for per-user todo management with the free plan cap
"""
import logging
from typing import List, Optional

from config.settings import settings
from crud.todo import TodoRepository
from database import InMemoryStore
from models.todo import Todo
from models.user import User
from utils.errors import TodoLimitExceeded, TodoNotFound
from utils.validators import parse_deadline

logger = logging.getLogger(__name__)


class TodoService:
    """
    Service for a user's todos.
    All operations are scoped to the owning user.
    """

    def __init__(self, store: InMemoryStore, todo_repo: TodoRepository = None, todo_limit: Optional[int] = None):
        """
        Initialize the todo service.

        Args:
            store: InMemoryStore instance shared by the app
            todo_repo: TodoRepository instance (built from store if omitted)
            todo_limit: Free plan cap, defaults to settings.free_plan_todo_limit
        """
        self.store = store
        self.todo_repo = todo_repo or TodoRepository(store)
        self.todo_limit = settings.free_plan_todo_limit if todo_limit is None else todo_limit

    def can_create_todo(self, user: User) -> bool:
        """Pro users are never capped; free users stop at todo_limit."""
        if user.pro:
            return True
        return self.todo_repo.count_todos(user) < self.todo_limit

    def list_todos(self, user: User) -> List[Todo]:
        return self.todo_repo.list_todos(user)

    def get_todo(self, user: User, todo_id: str) -> Todo:
        todo = self.todo_repo.get_todo(user, todo_id)
        if todo is None:
            raise TodoNotFound()
        return todo

    async def create_todo(self, user: User, title: str, deadline) -> Todo:
        """
        Create a todo for the user.

        Raises:
            InvalidDeadlineFormat: if deadline cannot be parsed
            TodoLimitExceeded: if a free user already has todo_limit todos
        """
        parsed_deadline = parse_deadline(deadline)

        async with self.store.lock:
            if not self.can_create_todo(user):
                logger.warning(
                    f"Todo creation rejected for user {user.id}: "
                    f"free plan limit of {self.todo_limit} reached"
                )
                raise TodoLimitExceeded()
            todo = self.todo_repo.add_todo(user, title, parsed_deadline)

        logger.info(f"Created todo {todo.id} for user {user.id}")
        return todo

    async def update_todo(self, user: User, todo: Todo, title: str, deadline) -> Todo:
        """Overwrite title and deadline; id, done and created_at are kept."""
        parsed_deadline = parse_deadline(deadline)

        async with self.store.lock:
            self.todo_repo.update_todo(todo, {"title": title, "deadline": parsed_deadline})

        logger.info(f"Updated todo {todo.id} for user {user.id}")
        return todo

    async def mark_done(self, user: User, todo: Todo) -> Todo:
        async with self.store.lock:
            self.todo_repo.update_todo(todo, {"done": True})

        logger.info(f"Marked todo {todo.id} done for user {user.id}")
        return todo

    async def delete_todo(self, user: User, todo_id: str) -> None:
        """
        Remove a todo from the user's sequence.

        Raises:
            TodoNotFound: if the todo is gone by the time it is removed
        """
        async with self.store.lock:
            removed = self.todo_repo.delete_todo(user, todo_id)

        if not removed:
            logger.warning(f"Delete failed: todo {todo_id} no longer present for user {user.id}")
            raise TodoNotFound()
        logger.info(f"Deleted todo {todo_id} for user {user.id}")
