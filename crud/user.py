"""
UserRepository for store operations on the User model
"""

from typing import Optional

from database import InMemoryStore
from models.user import User


class UserRepository:
    """
    Repository class for User store operations.
    Encapsulates all lookup and mutation logic for users.
    Callers that check then mutate must hold store.lock.
    """

    def __init__(self, store: InMemoryStore):
        """
        Initialize the repository with a store.

        Args:
            store: InMemoryStore instance holding users and their todos
        """
        self.store = store

    def get_user_by_username(self, username: Optional[str]) -> Optional[User]:
        """
        Retrieve a user by username.

        Args:
            username: Exact, case-sensitive username

        Returns:
            User object if found, None otherwise
        """
        if username is None:
            return None
        user_id = self.store.usernames.get(username)
        if user_id is None:
            return None
        return self.store.users.get(user_id)

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User object if found, None otherwise
        """
        return self.store.users.get(user_id)

    def username_exists(self, username: str) -> bool:
        return username in self.store.usernames

    def create_user(self, name: str, username: str) -> User:
        """
        Create a new free-plan user with no todos.

        Args:
            name: Display name
            username: Unique username (uniqueness is checked by the caller)

        Returns:
            Created User object
        """
        user = User(name=name, username=username)
        self.store.users[user.id] = user
        self.store.usernames[user.username] = user.id
        return user

    def update_user(self, user: User, updates: dict) -> User:
        """
        Update user fields.

        Args:
            user: User object to update
            updates: Dictionary of fields to update (e.g., {"pro": True})

        Returns:
            Updated User object
        """
        for key, value in updates.items():
            if hasattr(user, key):
                setattr(user, key, value)
        return user
