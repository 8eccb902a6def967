"""Admin login request and response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AdminLoginRequest(BaseModel):
    """Payload for admin login attempts."""

    password: Any = None


class AdminLoginResponse(BaseModel):
    success: bool = True
    token: str
    expires_at: str = Field(alias="expiresAt")

    model_config = ConfigDict(populate_by_name=True)
