from typing import Optional

from pydantic import Field

from .common_dto import ApiModel


class ProfileInfo(ApiModel):
    """DTO for the optional profile block of a user"""
    full_name: Optional[str] = Field(None, alias="fullName")
    bio: Optional[str] = None


class UserResponse(ApiModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    email: str
    profile: Optional[ProfileInfo] = None


class CurrentUserResponse(ApiModel):
    """DTO for GET /me"""
    success: bool = True
    user: UserResponse
