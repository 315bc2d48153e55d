"""
Bev's Bakery Backend - Admin Dashboard Access
==============================================

What:  The credential check in front of the admin orders page.
How:   Compares the submitted username/password with the configured pair
       and, on success, sets a boolean flag in the signed session cookie.

This is a convenience gate for a single shop owner, not an account system:
there is one fixed credential pair and no per-user state. The JSON API
itself is not behind it.
"""

import logging
import secrets
from typing import Any, MutableMapping, Optional

from bakery.config import settings
from bakery.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)

SESSION_FLAG = "is_admin_auth"


def authenticate_admin(username: Optional[str], password: Optional[str]) -> None:
    """
    Raises:
        ValidationError: a field was left empty
        AuthenticationError: the pair does not match the configured one
    """
    if not username:
        raise ValidationError(message="Username is required", field="username")
    if not password:
        raise ValidationError(message="Password is required", field="password")

    username_ok = secrets.compare_digest(username.encode(), settings.admin_username.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.admin_password.encode())
    if not (username_ok and password_ok):
        logger.warning("Failed admin login for username '%s'", username)
        raise AuthenticationError()
    logger.info("Admin '%s' logged in", username)


def is_admin(session: MutableMapping[str, Any]) -> bool:
    return session.get(SESSION_FLAG) is True


def log_in(session: MutableMapping[str, Any]) -> None:
    session[SESSION_FLAG] = True


def log_out(session: MutableMapping[str, Any]) -> None:
    session.pop(SESSION_FLAG, None)
