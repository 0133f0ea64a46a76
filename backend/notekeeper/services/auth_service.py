"""
NoteKeeper Backend — Auth Service
===================================

What:  Checks a username/password pair against the static user directory
       and issues a bearer token on success; verifies presented tokens.
Who:   login() is called by POST /api/login; verify() by the
       `require_identity` dependency guarding every notes route.

Security Note:
    Passwords are compared in plaintext against a hard-coded demo list.
    That mirrors the demo deployment this API backs and is not a pattern to
    copy: a real directory would store salted hashes.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, Optional

from notekeeper.exceptions import AuthenticationError, ValidationError
from notekeeper.models.user import Identity, User
from notekeeper.schemas.auth import LoginResponse, UserSummary
from notekeeper.security import ALGORITHM, TOKEN_TTL, issue_token, verify_token

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    User(id=1, username="admin", password="password"),
    User(id=2, username="user", password="test123"),
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AuthService:
    """
    Stateless credential check + token issuance.

    The only state is the immutable user directory and the signing config,
    both fixed at construction time.
    """

    def __init__(
        self,
        secret: str,
        users: Iterable[User] = DEFAULT_USERS,
        ttl: timedelta = TOKEN_TTL,
        algorithm: str = ALGORITHM,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._users: Dict[str, User] = {}
        for user in users:
            if user.username in self._users:
                raise ValueError(f"Duplicate username in user directory: {user.username!r}")
            self._users[user.username] = user
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    def find_user(self, username: str, password: str) -> Optional[User]:
        """Exact, case-sensitive match on both fields."""
        user = self._users.get(username)
        if user is None or user.password != password:
            return None
        return user

    def login(self, username: Optional[str], password: Optional[str]) -> LoginResponse:
        """
        Exchange credentials for a token.

        Raises:
            ValidationError: either field missing or empty (→ 400)
            AuthenticationError: no user with that username/password (→ 401)
        """
        if not username or not password:
            raise ValidationError(message="Username and password required")

        user = self.find_user(username, password)
        if user is None:
            logger.warning("Failed login attempt for username '%s'", username)
            raise AuthenticationError(context={"username": username})

        identity = user.to_identity()
        token = issue_token(
            identity,
            self._secret,
            now=self._clock(),
            ttl=self._ttl,
            algorithm=self._algorithm,
        )
        logger.info("User '%s' (id=%d) logged in", user.username, user.id)

        return LoginResponse(
            token=token,
            user=UserSummary(id=identity.id, username=identity.username),
        )

    def verify(self, token: str) -> Identity:
        """Validate a bearer token against this service's secret and clock."""
        return verify_token(token, self._secret, now=self._clock(), algorithm=self._algorithm)
