"""
Business logic for users.

Passwords are stored as PBKDF2 hashes produced by ``core.security``.
Username and email uniqueness is left to the database: registering a
taken username or email raises ``sqlite3.IntegrityError``.
"""

import logging
from typing import List, Optional

from ..core.db import transaction
from ..core.exceptions import ValidationError
from ..core.security import hash_password, verify_password
from ..models.user import User
from ..mappers.user_mapper import UserMapper
from ..schemas.user import PasswordChange, UserCreate, UserUpdate
from .base import require

logger = logging.getLogger(__name__)


class UserService:
    """Service for registration, login and profile maintenance."""

    @classmethod
    async def register_user(cls, data: UserCreate) -> User:
        """Create a user with a hashed password and return the stored record."""
        logger.info("Registering user %s", data.username)
        with transaction() as conn:
            mapper = UserMapper(conn)
            user_id = mapper.insert(
                User(
                    username=data.username,
                    email=data.email,
                    password=hash_password(data.password),
                    name=data.name,
                )
            )
            created = mapper.find_by_id(user_id)
        logger.info("Registered user %s id=%s", data.username, user_id)
        return created

    @classmethod
    async def authenticate(cls, username: str, password: str) -> Optional[User]:
        """Return the user when the credentials match, otherwise ``None``."""
        with transaction() as conn:
            user = UserMapper(conn).find_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.info("Failed login for %s", username)
            return None
        return user

    @classmethod
    async def get_all_users(cls) -> List[User]:
        with transaction() as conn:
            return UserMapper(conn).find_all()

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> User:
        with transaction() as conn:
            return require(UserMapper(conn).find_by_id(user_id), f"User not found: id={user_id}")

    @classmethod
    async def get_user_by_username(cls, username: str) -> User:
        with transaction() as conn:
            return require(UserMapper(conn).find_by_username(username), f"User not found: {username}")

    @classmethod
    async def get_user_by_email(cls, email: str) -> User:
        with transaction() as conn:
            return require(UserMapper(conn).find_by_email(email), f"User not found: {email}")

    @classmethod
    async def update_profile(cls, username: str, data: UserUpdate) -> User:
        """Change email and display name of ``username``."""
        logger.info("Updating profile of %s", username)
        with transaction() as conn:
            mapper = UserMapper(conn)
            user = require(mapper.find_by_username(username), f"User not found: {username}")
            user.email = data.email
            user.name = data.name
            mapper.update(user)
            return mapper.find_by_id(user.id)

    @classmethod
    async def change_password(cls, username: str, data: PasswordChange) -> None:
        """Replace the password after checking the current one.

        Raises ``ValidationError`` on ``current_password`` when it does
        not match.
        """
        logger.info("Changing password of %s", username)
        with transaction() as conn:
            mapper = UserMapper(conn)
            user = require(mapper.find_by_username(username), f"User not found: {username}")
            if not verify_password(data.current_password, user.password):
                raise ValidationError("Current password is incorrect", field="current_password")
            mapper.update_password(user.id, hash_password(data.new_password))

    @classmethod
    async def reset_password(cls, username: str, new_password: str) -> None:
        """Set a new password without checking the old one (admin tooling)."""
        logger.info("Resetting password of %s", username)
        with transaction() as conn:
            mapper = UserMapper(conn)
            user = require(mapper.find_by_username(username), f"User not found: {username}")
            mapper.update_password(user.id, hash_password(new_password))
