"""
Invitation Entity

Single-use invitations to join an organization with a preset role.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import to_naive_utc, utcnow
from .enums import AdminType, InvitationStatus, UserRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending invitations to join an organization.

    Business Rules:
    - Created by a super_admin or administrator of the organization
    - Expires after INVITATION_TTL_DAYS (7 by default)
    - Token is single-use: accepted_at goes from NULL to a timestamp once
    - Never deleted; accepted_at keeps the history
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )
    email: str = Field(max_length=255, nullable=False, index=True)

    invited_role: UserRole = Field(nullable=False)
    specialties: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    admin_type: Optional[AdminType] = Field(default=None)

    invited_by_user_id: UUID = Field(nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    accepted_by_user_id: Optional[UUID] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_org_email", "organization_id", "email"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = to_naive_utc(now) if now is not None else utcnow()
        return now > to_naive_utc(self.expires_at)

    def status_at(self, now: Optional[datetime] = None) -> InvitationStatus:
        if self.accepted_at is not None:
            return InvitationStatus.accepted
        if self.is_expired(now):
            return InvitationStatus.expired
        return InvitationStatus.pending
