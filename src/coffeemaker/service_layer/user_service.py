"""Email-format checks and fixed-credential authentication."""

import logging

from coffeemaker.config import ADMIN_PASSWORD, ADMIN_USERNAME

logger = logging.getLogger(__name__)


class UserService:
    """Stateless user checks against a single configured account."""

    def __init__(
        self, username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD
    ) -> None:
        self._username = username
        self._password = password

    @staticmethod
    def is_valid_email(email: str | None) -> bool:
        """Return True if ``email`` contains both an ``@`` and a ``.``."""
        if email is None:
            return False
        return "@" in email and "." in email

    def authenticate(self, username: str | None, password: str | None) -> bool:
        """Return True only for the configured username/password pair."""
        if username == self._username and password == self._password:
            return True
        logger.debug("authenticate %r: invalid credentials", username)
        return False
