"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.app.services.invitation_links import build_invitation_link
from src.domain.entities import Invitation, InvitationStatus
from src.domain.onboarding import InvitationPayload


# ============================================================================
# Command DTOs
# ============================================================================


class CreateInvitationCommand(BaseModel):
    """Validated intent to invite a provider into the inviter's organization"""

    email: str
    role: str
    specialties: List[str] = Field(default_factory=list)
    admin_type: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AcceptInvitationResponse(BaseModel):
    """
    Result of the acceptance procedure.

    Failures are reported in-band (success=False plus an error code) so the
    onboarding page can tell a bad link from a used or expired one.
    """

    success: bool
    role: Optional[str] = None
    specialties: Optional[List[str]] = None
    admin_type: Optional[str] = None
    organization_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "AcceptInvitationResponse":
        return cls(success=False, error=error)

    @classmethod
    def from_invitation(cls, invitation: Invitation) -> "AcceptInvitationResponse":
        return cls(
            success=True,
            role=invitation.invited_role.value,
            specialties=list(invitation.specialties or []),
            admin_type=invitation.admin_type.value if invitation.admin_type else None,
            organization_id=str(invitation.organization_id),
        )

    def to_payload(self) -> InvitationPayload:
        return InvitationPayload(
            role=self.role,
            specialties=self.specialties or [],
            admin_type=self.admin_type,
            organization_id=self.organization_id,
        )


class InvitationResponse(BaseModel):
    """Invitation as shown to the inviting organization"""

    id: str
    email: str
    role: str
    specialties: List[str]
    admin_type: Optional[str] = None
    status: InvitationStatus
    created_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    invitation_link: Optional[str] = None

    @classmethod
    def from_invitation(
        cls, invitation: Invitation, now: Optional[datetime] = None
    ) -> "InvitationResponse":
        status = invitation.status_at(now)
        return cls(
            id=str(invitation.id),
            email=invitation.email,
            role=invitation.invited_role.value,
            specialties=list(invitation.specialties or []),
            admin_type=invitation.admin_type.value if invitation.admin_type else None,
            status=status,
            created_at=invitation.created_at,
            expires_at=invitation.expires_at,
            accepted_at=invitation.accepted_at,
            # Links are only handed out while they can still be used
            invitation_link=(
                build_invitation_link(invitation.token)
                if status == InvitationStatus.pending
                else None
            ),
        )


class InvitationListResponse(BaseModel):
    """Invitations of an organization, newest first"""

    invitations: List[InvitationResponse]
