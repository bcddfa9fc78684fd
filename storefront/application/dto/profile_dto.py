from typing import Optional

from pydantic import Field

from .common_dto import ApiModel


class UpdateProfileRequest(ApiModel):
    """DTO for profile update; empty or missing fields are left unchanged"""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = Field(None, alias="fullName")
    bio: Optional[str] = None
