# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.user_dto import CurrentUserResponse
from ...exceptions import NotFoundError
from ...mappers import to_user_response


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user's account and profile"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, user_id: str) -> CurrentUserResponse:
        """
        Args:
            user_id: ID resolved from the bearer token

        Returns:
            CurrentUserResponse with user information

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_store.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        return CurrentUserResponse(user=to_user_response(user))
