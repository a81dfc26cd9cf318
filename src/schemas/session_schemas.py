"""Session and device schemas.

Endpoints:
    GET    /auth/sessions                  - List active sessions
    DELETE /auth/sessions                  - Logout all devices
    DELETE /auth/sessions/{refresh_token}  - Logout one session
    GET    /auth/devices                   - List active devices
    DELETE /auth/devices/{device_id}       - Revoke a device
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SessionResponse(BaseModel):
    """Session as shown to its owner. Tokens are never returned."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Session ID")
    device_id: UUID = Field(..., description="Device the session belongs to")
    device_name: str | None = Field(None, description="Device summary")
    ip_address: str | None = Field(None, description="Address of the latest use")
    created_at: datetime | None = Field(None, description="Login time")
    last_used_at: datetime | None = Field(None, description="Latest refresh")
    expires_at: datetime = Field(..., description="Absolute expiry")
    is_current: bool = Field(False, description="Whether this is the calling session")


class DeviceResponse(BaseModel):
    """Active device with its live session count."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    device_name: str | None = None
    device_type: str | None = None
    browser: str | None = None
    os: str | None = None
    ip_address: str | None = None
    last_active_at: datetime | None = None
    created_at: datetime | None = None
    active_session_count: int = 0
