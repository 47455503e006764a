"""
User Service for registration, lookup and the pro plan upgrade
"""
import logging

from crud.user import UserRepository
from database import InMemoryStore
from models.user import User
from utils.errors import AlreadyPro, DuplicateUsername, UserNotFound
from utils.validators import ensure_valid_id

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for managing users.
    Handles registration, lookup by id and plan upgrades.
    """

    def __init__(self, store: InMemoryStore, user_repo: UserRepository = None):
        """
        Initialize the user service with a store and user repository.

        Args:
            store: InMemoryStore instance shared by the app
            user_repo: UserRepository instance (built from store if omitted)
        """
        self.store = store
        self.user_repo = user_repo or UserRepository(store)

    async def register_user(self, name: str, username: str) -> User:
        """
        Register a new free-plan user.

        Raises:
            DuplicateUsername: if the username is already taken
        """
        async with self.store.lock:
            if self.user_repo.username_exists(username):
                logger.warning(f"Registration rejected: username '{username}' already exists")
                raise DuplicateUsername()
            user = self.user_repo.create_user(name, username)

        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def get_user(self, user_id: str) -> User:
        """
        Resolve a user by id.

        The id format is checked before the lookup.

        Raises:
            InvalidIdFormat: if user_id is not a UUID
            UserNotFound: if no user has this id
        """
        ensure_valid_id(user_id)
        user = self.user_repo.get_user_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def get_user_by_username(self, username: str) -> User:
        user = self.user_repo.get_user_by_username(username)
        if user is None:
            raise UserNotFound()
        return user

    async def upgrade_to_pro(self, user: User) -> User:
        """
        Activate the pro plan for a user.
        The transition happens once; a second upgrade is rejected.

        Raises:
            AlreadyPro: if the user is already on the pro plan
        """
        async with self.store.lock:
            if user.pro:
                logger.warning(f"Upgrade rejected: user {user.id} is already pro")
                raise AlreadyPro()
            self.user_repo.update_user(user, {"pro": True})

        logger.info(f"User {user.id} upgraded to pro")
        return user
