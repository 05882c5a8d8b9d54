"""
Organization Entity

Tenant boundary for all clinical data.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AccountType, SubscriptionStatus


class Organization(SQLModel, table=True):
    """
    Organization entity - tenant boundary.

    Business Rules:
    - Every clinical row carries an organization reference
    - Created explicitly by a provider who finished onboarding
    - Invitations always target an existing organization
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    account_type: AccountType = Field(default=AccountType.small_practice)
    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.trial)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_organization_subscription_status", "subscription_status"),)
