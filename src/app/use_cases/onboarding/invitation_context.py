from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Invitation
from src.domain.onboarding import InvitationPayload


def payload_from_invitation(invitation: Invitation) -> InvitationPayload:
    return InvitationPayload(
        role=invitation.invited_role,
        specialties=list(invitation.specialties or []),
        admin_type=invitation.admin_type,
        organization_id=invitation.organization_id,
    )


async def find_accepted_invitation(uow: UnitOfWork, user_id: UUID) -> Optional[Invitation]:
    """Latest invitation the user accepted; call inside an open unit of work"""
    return await uow.invitations.get_latest_accepted_by_user(user_id)
