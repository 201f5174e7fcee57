"""
Authentication service for the meal planner.

Handles registration, password hashing, login and cookie sessions. Session
tokens are random strings stored next to the users with an expiry time.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional, Tuple

import bcrypt

from mealplan.domain.User import User
from mealplan.domain.errors import AuthenticationRequiredError, ConflictError
from mealplan.infra.Storage import Storage
from mealplan.utilities.config import SESSION_TTL_HOURS

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, storage: Storage, session_ttl_hours: int = SESSION_TTL_HOURS):
        self.storage = storage
        self.session_ttl = timedelta(hours=session_ttl_hours)

    # Password Management

    def hash_password(self, password: str) -> str:
        """Hash password using bcrypt"""
        hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt())
        return hashed.decode('utf-8')

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify password against hash"""
        try:
            return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
        except ValueError as e:
            logger.error("Password verification error: %s", e)
            return False

    # Registration and Login

    def register_user(self, username: str, password: str) -> Tuple[User, str]:
        """Create a user and open a session for it. Returns (user, session token)."""
        with self.storage.transaction():
            if self.storage.users.get_user_by_username(username):
                logger.warning("Registration rejected, username taken: %s", username)
                raise ConflictError()
            user = self.storage.users.create_user(username, self.hash_password(password))
            token = self.create_session(user)
        logger.info("User registered: %s", username)
        return user, token

    def login(self, username: str, password: str) -> Tuple[User, str]:
        user = self.storage.users.get_user_by_username(username)
        if not user or not self.verify_password(password, user.password_hash):
            logger.warning("Login failed for %s", username)
            raise AuthenticationRequiredError("Invalid username or password")
        token = self.create_session(user)
        logger.info("User logged in: %s", username)
        return user, token

    def logout(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return self.storage.users.delete_session(token)

    # Session Management

    def create_session(self, user: User) -> str:
        token = secrets.token_urlsafe(32)
        self.storage.users.create_session(token, user.id, datetime.now() + self.session_ttl)
        return token

    def get_session_user(self, token: Optional[str]) -> Optional[User]:
        """User of a live session, or None. Expired sessions are removed on sight."""
        if not token:
            return None
        session = self.storage.users.get_session(token)
        if session is None:
            return None
        if datetime.fromisoformat(session["expiresAt"]) <= datetime.now():
            self.storage.users.delete_session(token)
            return None
        return self.storage.users.get_user(session["userId"])

    def require_user(self, token: Optional[str]) -> User:
        user = self.get_session_user(token)
        if user is None:
            raise AuthenticationRequiredError()
        return user
