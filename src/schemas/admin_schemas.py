"""Administrative schemas (permission-gated endpoints)."""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums import AccountStatus


class AccountStatusUpdateRequest(BaseModel):
    """PATCH /admin/accounts/{account_id}/status"""

    status: AccountStatus = Field(..., description="ACTIVE or BLOCKED")


class VerificationCodeStatisticsResponse(BaseModel):
    """GET /admin/verification-codes/statistics"""

    model_config = ConfigDict(from_attributes=True)

    total: int
    expired: int
    by_purpose: dict[str, int] = Field(default_factory=dict)
