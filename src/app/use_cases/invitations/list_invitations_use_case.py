"""
List Invitations Use Case
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import INSUFFICIENT_ROLE, NO_ORGANIZATION, PROFILE_NOT_FOUND
from src.domain.base import utcnow
from src.domain.session_context import SessionContext

from .create_invitation_use_case import INVITING_ROLES
from .dtos import InvitationListResponse, InvitationResponse


class ListInvitationsUseCase:
    """
    Lists the caller's organization invitations, newest first, with derived
    status (pending / accepted / expired). Links are only included for
    pending invitations.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: SessionContext) -> Result[InvitationListResponse]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(session.user_id)
            if profile is None:
                return Return.err(Error(PROFILE_NOT_FOUND, "Provider profile not found"))

            if profile.organization_id is None:
                return Return.err(
                    Error(NO_ORGANIZATION, "You do not belong to an organization")
                )

            if profile.role not in INVITING_ROLES:
                return Return.err(
                    Error(INSUFFICIENT_ROLE, "Only administrators can view invitations")
                )

            invitations = await self.uow.invitations.get_by_organization_id(
                profile.organization_id
            )

            now = utcnow()
            return Return.ok(
                InvitationListResponse(
                    invitations=[
                        InvitationResponse.from_invitation(invitation, now)
                        for invitation in invitations
                    ]
                )
            )
