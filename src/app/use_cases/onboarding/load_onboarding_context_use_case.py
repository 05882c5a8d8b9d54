"""
Load Onboarding Context Use Case

Runs when the onboarding page mounts: consumes the invitation token from the
link (once) and tells the page which steps to render.
"""

import logging
from typing import Optional

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import ACCEPTANCE_ERRORS
from src.app.use_cases.invitations import AcceptInvitationUseCase
from src.domain.onboarding import InvitationPayload, OnboardingWizard
from src.domain.session_context import SessionContext

from .dtos import OnboardingPlanResponse
from .invitation_context import find_accepted_invitation, payload_from_invitation

logger = logging.getLogger(__name__)


class LoadOnboardingContextUseCase:
    """
    Business Rules:
    - A token, when given, goes through the acceptance procedure
    - Acceptance failures do not fail the page; they are reported as
      invitation_error and the standalone (3-step) plan is returned
    - Without a usable token, an invitation the caller accepted earlier still
      drives the plan, so reloading the page keeps the 2-step flow
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: SessionContext, token: Optional[str] = None
    ) -> Result[OnboardingPlanResponse]:
        payload: Optional[InvitationPayload] = None
        invitation_error: Optional[str] = None

        if token:
            accepted = await AcceptInvitationUseCase(self.uow).execute(token, session.user_id)
            if accepted.is_ok():
                payload = accepted.value.to_payload()
            elif accepted.error.code in ACCEPTANCE_ERRORS:
                invitation_error = accepted.error.code
                logger.info(
                    "Onboarding opened with unusable invitation for user %s: %s",
                    session.user_id,
                    invitation_error,
                )
            else:
                return accepted

        async with self.uow:
            if payload is None:
                previous = await find_accepted_invitation(self.uow, session.user_id)
                if previous is not None:
                    payload = payload_from_invitation(previous)
                    if previous.token == token:
                        # Reload of a link this user already consumed
                        invitation_error = None

            completed = await self.uow.profiles.get_onboarding_completed(session.user_id)

        wizard = OnboardingWizard(payload)
        return Return.ok(
            OnboardingPlanResponse.from_wizard(
                wizard,
                invitation_error=invitation_error,
                onboarding_completed=bool(completed),
            )
        )
