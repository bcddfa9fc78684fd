# Standard library imports
import logging
from typing import List

# Local application imports
from ....core.security import generate_token, hash_password
from ....domain.models.user import User
from ....domain.repositories.user_store import UserStore
from ....domain.validators.credential_validator import (
    validate_email,
    validate_password,
    validate_profile,
    validate_username,
)
from ...dto.auth_dto import AuthResponse
from ...dto.profile_dto import UpdateProfileRequest
from ...exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError
from ...mappers import to_user_response
from ...services.user_locks import UserLockRegistry

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """Use case for changing account settings and profile fields"""

    def __init__(self, user_store: UserStore, user_locks: UserLockRegistry) -> None:
        self.user_store = user_store
        self.user_locks = user_locks

    async def execute(self, user_id: str, request: UpdateProfileRequest) -> AuthResponse:
        """
        Apply the non-empty fields of the request to the user

        Every field is validated; the first problem found is raised. A new
        token is issued because the token embeds the username.

        Args:
            user_id: Current user
            request: Fields to change

        Returns:
            AuthResponse with a new token and the updated user

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: On the first invalid field, or when nothing changes
            ConflictError: If the new username or email belongs to another user
            PersistenceError: If the store refused the update
        """
        # The whole user document is rewritten, so cart writes must not interleave
        async with self.user_locks.hold(user_id):
            user = await self._apply_changes(user_id, request)

        token = generate_token(user.id, user.username)
        if not await self.user_store.save_token(token, user.id):
            raise PersistenceError("Failed to create session")

        logger.info(f"Updated profile of user {user_id}")
        return AuthResponse(
            message="Profile updated successfully",
            token=token,
            user=to_user_response(user),
        )

    async def _apply_changes(self, user_id: str, request: UpdateProfileRequest) -> User:
        user = await self.user_store.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        errors: List[ValueError] = []
        has_updates = False

        if request.username and request.username.strip() != user.username:
            result = validate_username(request.username)
            if not result.valid:
                errors.append(ValidationError(result.error))
            else:
                existing = await self.user_store.find_user_by_username(result.value)
                if existing is not None and existing.id != user_id:
                    errors.append(ConflictError("Username already taken"))
                else:
                    user.username = result.value
                    has_updates = True

        if request.email and request.email.strip().lower() != user.email:
            result = validate_email(request.email)
            if not result.valid:
                errors.append(ValidationError(result.error))
            else:
                existing = await self.user_store.find_user_by_email(result.value)
                if existing is not None and existing.id != user_id:
                    errors.append(ConflictError("Email already taken"))
                else:
                    user.email = result.value
                    has_updates = True

        if request.password:
            result = validate_password(request.password)
            if not result.valid:
                errors.append(ValidationError(result.error))
            else:
                user.password = hash_password(result.value)
                has_updates = True

        full_name = (request.full_name or "").strip()
        bio = (request.bio or "").strip()
        if full_name or bio:
            result = validate_profile(full_name, bio)
            if not result.valid:
                errors.append(ValidationError(result.error))
            else:
                if full_name:
                    user.full_name = full_name
                    has_updates = True
                if bio:
                    user.bio = bio
                    has_updates = True

        if errors:
            raise errors[0]

        if not has_updates:
            raise ValidationError("No profile changes detected")

        if not await self.user_store.update_user(user_id, user):
            raise PersistenceError("Failed to update user in database")

        return user
