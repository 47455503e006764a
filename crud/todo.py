"""
TodoRepository for store operations on a user's todo sequence
"""

from datetime import datetime
from typing import List, Optional

from database import InMemoryStore
from models.todo import Todo
from models.user import User


class TodoRepository:
    """
    Repository class for Todo store operations.
    Todos live inside their owning user's sequence, in insertion order.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store

    def list_todos(self, user: User) -> List[Todo]:
        return list(user.todos)

    def count_todos(self, user: User) -> int:
        return len(user.todos)

    def get_todo(self, user: User, todo_id: str) -> Optional[Todo]:
        """
        Retrieve a todo from the user's sequence by ID.

        Returns:
            Todo object if found, None otherwise
        """
        for todo in user.todos:
            if todo.id == todo_id:
                return todo
        return None

    def add_todo(self, user: User, title: str, deadline: datetime) -> Todo:
        """
        Append a new, not-done todo to the user's sequence.

        Returns:
            Created Todo object
        """
        todo = Todo(title=title, deadline=deadline)
        user.todos.append(todo)
        return todo

    def update_todo(self, todo: Todo, updates: dict) -> Todo:
        for key, value in updates.items():
            if hasattr(todo, key):
                setattr(todo, key, value)
        return todo

    def delete_todo(self, user: User, todo_id: str) -> bool:
        """
        Remove a todo from the user's sequence.

        Returns:
            True if a todo was removed, False if it was not present
        """
        for index, todo in enumerate(user.todos):
            if todo.id == todo_id:
                del user.todos[index]
                return True
        return False
