"""
NoteKeeper Backend — Access Token Helpers
===========================================

What:  Issue and verify the signed bearer tokens handed out by /api/login.
How:   Compact JWS (three base64url segments) via python-jose, HS256 with a
       server-held secret. Claims: {id, username, iat, exp}.

Both helpers are pure: the secret and the current time are arguments, never
read from the environment here. That keeps expiry testable without freezing
the clock.

Expiry is checked by hand against the `now` argument (jose's own check is
switched off because it always consults the wall clock). A token whose
`exp` equals `now` is already expired.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import jwt
from jose.exceptions import JOSEError

from notekeeper.exceptions import InvalidTokenError, MissingTokenError
from notekeeper.models.user import Identity

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=24)
BEARER_PREFIX = "Bearer "


def issue_token(
    identity: Identity,
    secret: str,
    now: datetime,
    ttl: timedelta = TOKEN_TTL,
    algorithm: str = ALGORITHM,
) -> str:
    """Create a signed token for `identity`, valid from `now` for `ttl`."""
    issued_at = int(now.timestamp())
    payload: Dict[str, Any] = {
        **identity.as_claims(),
        "iat": issued_at,
        "exp": issued_at + int(ttl.total_seconds()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str,
    secret: str,
    now: datetime,
    algorithm: str = ALGORITHM,
) -> Identity:
    """
    Decode and validate a token.

    Returns:
        The Identity embedded in the token.

    Raises:
        InvalidTokenError: bad signature, malformed token, missing or
        mistyped claims, or `exp <= now`.
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"verify_exp": False},
        )
    except JOSEError as e:
        raise InvalidTokenError(context={"reason": str(e)})

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)) or isinstance(exp, bool):
        raise InvalidTokenError(context={"reason": "missing exp claim"})
    if exp <= now.timestamp():
        raise InvalidTokenError(context={"reason": "token expired"})

    user_id = claims.get("id")
    username = claims.get("username")
    if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
        raise InvalidTokenError(context={"reason": "missing identity claims"})

    return Identity(id=user_id, username=username)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an `Authorization: Bearer <token>` header value.

    Raises:
        MissingTokenError: header absent, another scheme, or empty token.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingTokenError()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingTokenError()
    return token
