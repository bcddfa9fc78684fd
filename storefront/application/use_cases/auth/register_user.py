# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_store import UserStore
from ....domain.validators.credential_validator import (
    validate_email,
    validate_password,
    validate_username,
)
from ....core.security import generate_token, generate_user_id, hash_password
from ...dto.auth_dto import AuthResponse, SignupRequest
from ...exceptions import ConflictError, PersistenceError, ValidationError
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for signing up a new user and issuing their first token"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Signup request with username, email and password

        Returns:
            AuthResponse with the token and the created user

        Raises:
            ValidationError: If a field is missing or invalid
            ConflictError: If the username or email is already registered
            PersistenceError: If the store refused to create the user
        """
        if not request.username or not request.email or not request.password:
            raise ValidationError("Username, email, and password are required")

        username_result = validate_username(request.username)
        email_result = validate_email(request.email)
        password_result = validate_password(request.password)
        for result in (username_result, email_result, password_result):
            if not result.valid:
                raise ValidationError(result.error)

        username = username_result.value
        email = email_result.value

        if await self.user_store.find_user_by_username(username) is not None:
            raise ConflictError("Username already exists")
        if await self.user_store.email_exists(email):
            raise ConflictError("Email already exists")

        user_id = generate_user_id()
        created = await self.user_store.create_user(
            username=username,
            email=email,
            password=hash_password(request.password),
            user_id=user_id,
        )
        if not created:
            # Lost a race or hit a unique index: report which value collided
            if await self.user_store.email_exists(email):
                raise ConflictError("Email already exists")
            if await self.user_store.find_user_by_username(username) is not None:
                raise ConflictError("Username already exists")
            raise PersistenceError("Failed to create user. Please try again.")

        token = generate_token(user_id, username)
        if not await self.user_store.save_token(token, user_id):
            raise PersistenceError("Failed to create session")

        user = await self.user_store.find_user_by_id(user_id)
        if user is None:
            raise PersistenceError("Failed to create user. Please try again.")

        logger.info(f"User '{username}' signed up ({user_id})")
        return AuthResponse(
            message="User created successfully",
            token=token,
            user=to_user_response(user),
        )
