# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.auth_dto import AuthResponse
from ...application.dto.profile_dto import UpdateProfileRequest
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase
from ...di.container import get_container
from ..errors import to_http_exception
from .dependencies import get_current_user_id


router = APIRouter(tags=["profile"])


@router.patch("/profile", response_model=AuthResponse, response_model_exclude_none=True)
async def update_profile(
    request: UpdateProfileRequest,
    user_id: str = Depends(get_current_user_id),
) -> AuthResponse:
    """
    Update account settings and profile fields

    Args:
        request: Fields to change; empty fields are ignored
        user_id: Current authenticated user (from dependency)

    Returns:
        AuthResponse with a new token and the updated user
    """
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)

    try:
        return await update_profile_use_case.execute(user_id, request)
    except ValueError as exception:
        raise to_http_exception(exception)
