# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.exceptions import AuthenticationError
from ...application.use_cases.auth.authenticate_token import (
    ACCESS_TOKEN_REQUIRED_MESSAGE,
    AuthenticateTokenUseCase,
)
from ...di.container import get_container


# auto_error=False so a missing header yields our 401 envelope instead of 403
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency to resolve the bearer token to a user ID

    Args:
        credentials: HTTP Bearer token credentials, if any were sent

    Returns:
        ID of the authenticated user

    Raises:
        HTTPException: 401 if the token is missing or unknown
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ACCESS_TOKEN_REQUIRED_MESSAGE,
        )

    container = get_container()
    authenticate_use_case = container.get(AuthenticateTokenUseCase)

    try:
        return await authenticate_use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception),
        )
