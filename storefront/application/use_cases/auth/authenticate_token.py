# Local application imports
from ....domain.repositories.user_store import UserStore
from ...exceptions import AuthenticationError

ACCESS_TOKEN_REQUIRED_MESSAGE = "Access token required"


class AuthenticateTokenUseCase:
    """Use case for resolving a bearer token to the user ID it was issued for"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, token: str) -> str:
        """
        Args:
            token: Opaque bearer token

        Returns:
            ID of the token's user

        Raises:
            AuthenticationError: If the token is empty or unknown
        """
        if not token:
            raise AuthenticationError(ACCESS_TOKEN_REQUIRED_MESSAGE)

        user_id = await self.user_store.get_user_id_from_token(token)
        if not user_id:
            raise AuthenticationError(ACCESS_TOKEN_REQUIRED_MESSAGE)
        return user_id
