"""Explicit session context for the active user."""

from dataclasses import dataclass
from typing import Optional

from bankapp.domain.entities import User
from bankapp.domain.errors import NotAuthenticatedError, not_authenticated


@dataclass
class UserSession:
    """Holds the currently authenticated user, if any.

    A session is passed explicitly to every bank operation, so several
    sessions can coexist in one process.
    """

    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def require_user(self) -> User:
        """Return the active user.

        Raises:
            NotAuthenticatedError: If nobody is logged in
        """
        if self.user is None:
            raise NotAuthenticatedError(not_authenticated())
        return self.user

    def clear(self) -> None:
        self.user = None
