from pydantic import BaseModel, field_validator
from typing import Any, Optional


class SyncUserRequest(BaseModel):
    """Request model for mirroring an identity-provider user locally"""
    id: str
    email: str
    full_name: Optional[str] = None

    @field_validator('id', 'email')
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Missing required fields')
        return v.strip()


class SaveDashboardDataRequest(BaseModel):
    """Request model for storing one dashboard widget's data"""
    user_id: str
    data_type: str
    data: Optional[Any] = None

    @field_validator('user_id', 'data_type')
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Missing required fields')
        return v
