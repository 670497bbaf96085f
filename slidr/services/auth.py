"""
Signup and login.

Passwords are stored as given and compared with plain string equality.
No session or token is issued: the client keeps the returned ``userId``
and sends it back on project requests, which the server trusts as-is.
"""

import logging

from ..crud.user import UserStore
from ..exceptions import DuplicateEmail, InvalidCredentials
from ..models.user import User
from ..schemas.auth import AuthResponse, SignInRequest, SignUpRequest

logger = logging.getLogger(__name__)

SIGNUP_MESSAGE = "Signup successful!"
LOGIN_MESSAGE = "Login successful!"


def _auth_response(user: User, message: str) -> AuthResponse:
    return AuthResponse(
        user_id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        message=message,
    )


class AuthService:
    def __init__(self, users: UserStore):
        self.users = users

    def signup(self, payload: SignUpRequest) -> AuthResponse:
        if self.users.find_by_email(payload.email) is not None:
            logger.info("Signup rejected, email already registered: %s", payload.email)
            raise DuplicateEmail()

        user = self.users.save(
            User(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                password=payload.password,
            )
        )
        logger.info("User %s signed up (%s)", user.id, user.email)
        return _auth_response(user, SIGNUP_MESSAGE)

    def login(self, payload: SignInRequest) -> AuthResponse:
        user = self.users.find_by_email(payload.email)
        if user is None or user.password != payload.password:
            logger.warning("Failed login for %s", payload.email)
            raise InvalidCredentials()

        logger.info("User %s logged in", user.id)
        return _auth_response(user, LOGIN_MESSAGE)
