# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.common_dto import HealthResponse
from ...domain.repositories.user_store import UserStore
from ...di.container import get_container


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the server is up and which storage backend it uses"""
    user_store = get_container().get(UserStore)
    return HealthResponse(message="Server is running", backend=user_store.name)
