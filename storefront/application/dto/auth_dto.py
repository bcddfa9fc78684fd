from typing import Optional

from .common_dto import ApiModel
from .user_dto import UserResponse


class SignupRequest(ApiModel):
    """DTO for signup request; presence and format are checked by the use case"""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(ApiModel):
    """DTO for login request; username may also be an email address"""
    username: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(ApiModel):
    """DTO for responses that hand out a fresh token"""
    success: bool = True
    message: str
    token: str
    user: UserResponse
