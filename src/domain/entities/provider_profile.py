"""
ProviderProfile Entity

One row per authenticated user.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AdminType, UserRole


class ProviderProfile(SQLModel, table=True):
    """
    ProviderProfile entity - a provider's identity and onboarding state.

    Business Rules:
    - user_id is the identity issued by the authentication provider (unique)
    - onboarding_completed is monotonic: false -> true, never reversed
    - role and organization are set by onboarding or organization creation,
      never by settings edits
    """

    __tablename__ = "provider_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True, nullable=False)

    # Identity
    email: str = Field(max_length=255)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    phone: Optional[str] = Field(default=None, max_length=32)

    role: Optional[UserRole] = Field(default=None)
    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )
    organization_name: Optional[str] = Field(default=None, max_length=255)

    # Professional details (collected by onboarding)
    professional_email: Optional[str] = Field(default=None, max_length=255)
    professional_phone: Optional[str] = Field(default=None, max_length=32)
    specialties: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    specialty: Optional[str] = Field(default=None, max_length=100)  # legacy single value
    npi_number: Optional[str] = Field(default=None, max_length=10)
    admin_type: Optional[AdminType] = Field(default=None)
    department: Optional[str] = Field(default=None, max_length=255)

    onboarding_completed: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_profile_onboarding_completed", "onboarding_completed"),
    )
