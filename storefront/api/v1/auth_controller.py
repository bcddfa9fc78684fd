# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import AuthResponse, LoginRequest, SignupRequest
from ...application.dto.user_dto import CurrentUserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...di.container import get_container
from ..errors import to_http_exception
from .dependencies import get_current_user_id


router = APIRouter(tags=["authentication"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def signup(request: SignupRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: Signup request

    Returns:
        AuthResponse with the first token of the new user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=AuthResponse, response_model_exclude_none=True)
async def login(request: LoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: Login request; username may be an email address

    Returns:
        AuthResponse with a new token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.get("/me", response_model=CurrentUserResponse, response_model_exclude_none=True)
async def get_me(user_id: str = Depends(get_current_user_id)) -> CurrentUserResponse:
    """
    Get current authenticated user information

    Args:
        user_id: Current authenticated user (from dependency)
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(user_id)
    except ValueError as exception:
        raise to_http_exception(exception)
