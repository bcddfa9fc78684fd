# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.models.user import User
from ....domain.repositories.user_store import UserStore
from ....core.security import generate_token, verify_password
from ...dto.auth_dto import AuthResponse, LoginRequest
from ...exceptions import AuthenticationError, PersistenceError, ValidationError
from ...mappers import to_user_response

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a token"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def _find_user(self, identifier: str) -> Optional[User]:
        user = await self.user_store.find_user_by_username(identifier)
        if user is None and "@" in identifier:
            user = await self.user_store.find_user_by_email(identifier)
        return user

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username (or email) and password

        Returns:
            AuthResponse with a new token

        Raises:
            ValidationError: If username or password is missing
            AuthenticationError: If the credentials do not match a user
        """
        if not request.username or not request.password:
            raise ValidationError("Username and password are required")

        user = await self._find_user(request.username.strip())
        if user is None or not verify_password(request.password, user.password):
            logger.info("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        token = generate_token(user.id, user.username)
        if not await self.user_store.save_token(token, user.id):
            raise PersistenceError("Failed to create session")

        return AuthResponse(
            message="Login successful",
            token=token,
            user=to_user_response(user),
        )
