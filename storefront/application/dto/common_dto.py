from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base DTO: camelCase aliases on the wire, snake_case names in Python"""
    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(ApiModel):
    """DTO for the plain {success, message} envelope"""
    success: bool
    message: str


class HealthResponse(ApiModel):
    """DTO for the health check"""
    success: bool = True
    message: str
    backend: str
