"""
Accept Invitation Use Case

Consumes a single-use invitation token on behalf of the signed-in provider.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import ALREADY_ACCEPTED, EXPIRED, INVALID_TOKEN
from src.domain.base import to_naive_utc, utcnow

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - Unknown token -> invalid_token
    - now > expires_at -> expired, whether or not it was accepted
    - accepted_at already set -> already_accepted
    - Otherwise accepted_at/accepted_by are set in one conditional UPDATE;
      of two concurrent callers only one matches the row, the other gets
      already_accepted
    - Only the invitation row is written; failures write nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: str, user_id: UUID, now: Optional[datetime] = None
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token from the onboarding link
            user_id: Authenticated user accepting the invitation
            now: Acceptance time (defaults to current UTC time)

        Returns:
            Result with AcceptInvitationResponse, or Error carrying one of
            invalid_token / expired / already_accepted
        """
        now = to_naive_utc(now) if now is not None else utcnow()

        if not token:
            return Return.err(Error(INVALID_TOKEN, "Invalid or non-existent invitation token"))

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)

            if invitation is None:
                return Return.err(
                    Error(INVALID_TOKEN, "Invalid or non-existent invitation token")
                )

            if invitation.is_expired(now):
                return Return.err(Error(EXPIRED, "This invitation has expired"))

            if invitation.accepted_at is not None:
                return Return.err(
                    Error(ALREADY_ACCEPTED, "This invitation has already been accepted")
                )

            accepted = await self.uow.invitations.mark_accepted(invitation.id, user_id, now)
            if not accepted:
                # Lost the race against a concurrent acceptance
                await self.uow.rollback()
                return Return.err(
                    Error(ALREADY_ACCEPTED, "This invitation has already been accepted")
                )

            await self.uow.commit()

            logger.info(
                "Invitation %s accepted by user %s as %s",
                invitation.id,
                user_id,
                invitation.invited_role.value,
            )

            return Return.ok(AcceptInvitationResponse.from_invitation(invitation))
