"""User registration and login."""

from bankapp.database.base import Database
from bankapp.domain.entities import User
from bankapp.domain.errors import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    ValidationError,
    duplicate_username,
    invalid_credentials,
)
from bankapp.domain.session import UserSession
from bankapp.logging import event_fields, get_logger

logger = get_logger(__name__)


class UserDirectory:
    """Service for managing users and the active session user.

    Passwords are stored and compared as plain strings.
    """

    def __init__(self, db: Database):
        """Initialize user directory.

        Args:
            db: Database instance
        """
        self.db = db

    def register(self, session: UserSession, username: str, password: str) -> User:
        """Register a new user and log them in.

        Args:
            session: Session that becomes authenticated as the new user
            username: Unique, case-sensitive username
            password: Password

        Returns:
            The new user

        Raises:
            ValidationError: If username is empty
            DuplicateUsernameError: If the username is already taken
        """
        if not username:
            raise ValidationError("Username must not be empty")

        # Exact, case-sensitive match
        if self.get_user(username) is not None:
            logger.info(
                "Rejected registration of existing username %s",
                username,
                extra=event_fields(username=username),
            )
            raise DuplicateUsernameError(duplicate_username(username))

        user = self.db.create_user(username=username, password=password)
        session.user = user
        logger.info("Registered user %s", username, extra=event_fields(username=username))
        return user

    def login(self, session: UserSession, username: str, password: str) -> User:
        """Authenticate a user.

        Raises:
            InvalidCredentialsError: If no user matches both username and password;
                the session is left unchanged
        """
        for user in self.db.list_users():
            if user.username == username and user.password == password:
                session.user = user
                logger.info("User %s logged in", username, extra=event_fields(username=username))
                return user

        logger.warning(
            "Failed login attempt for username %s", username, extra=event_fields(username=username)
        )
        raise InvalidCredentialsError(invalid_credentials())

    def logout(self, session: UserSession) -> None:
        """Clear the session's active user. The user record is kept."""
        if session.user is not None:
            logger.info("User %s logged out", session.user.username)
        session.clear()

    def get_user(self, username: str) -> User | None:
        return self.db.get_user(username)
