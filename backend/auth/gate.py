"""Credential checks and session token handling for administrators.

Tokens are stateless JWTs bound to the admin username. Nothing is stored on the
server, so logging out only asks the client to drop its cookie; a token that
leaks stays usable until it expires.
"""
import logging
import secrets

import jwt

from backend.auth import jwt_handler
from backend.auth.admins import AdminDirectory

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for authentication failures."""


class InvalidCredentials(AuthError):
    pass


class MissingToken(AuthError):
    pass


class InvalidToken(AuthError):
    pass


class UnknownUser(AuthError):
    pass


class AuthGate:
    def __init__(self, admins: AdminDirectory) -> None:
        self.admins = admins

    def login(self, user: str, password: str) -> tuple[str, str]:
        admin = self.admins.find(user)
        if admin is None:
            logger.info('Login rejected for unknown user %r', user)
            raise InvalidCredentials('User not found')

        if not secrets.compare_digest(admin.password.encode(), password.encode()):
            logger.info('Login rejected for %r: incorrect password', user)
            raise InvalidCredentials('Incorrect password')

        return admin.user, jwt_handler.create_access_token(subject=admin.user)

    def verify(self, token: str | None) -> str:
        if not token:
            raise MissingToken('Token not found')

        try:
            payload = jwt_handler.decode_access_token(token)
        except jwt.InvalidTokenError as exc:
            raise InvalidToken('Invalid token') from exc

        user = payload.get('sub')
        if not isinstance(user, str) or self.admins.find(user) is None:
            raise UnknownUser('User not found')

        return user
