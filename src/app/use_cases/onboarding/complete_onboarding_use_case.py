"""
Complete Onboarding Use Case

Final step of the wizard: re-validates everything and writes the profile.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    ONBOARDING_ALREADY_COMPLETED,
    PERSISTENCE_ERROR,
    PROFILE_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.app.use_cases.profiles.dtos import ProfileResponse
from src.domain.onboarding import OnboardingData, OnboardingWizard
from src.domain.session_context import SessionContext

from .invitation_context import find_accepted_invitation, payload_from_invitation

logger = logging.getLogger(__name__)


class CompleteOnboardingUseCase:
    """
    Business Rules:
    - Every step is re-validated here; client-side checks are not trusted
    - Invited role and organization come from the invitation the caller
      accepted, never from the request body
    - Physicians: specialties + credential ID; administrators: admin subtype;
      standalone: organization name + first specialty as legacy value
    - One update of the caller's own profile row, onboarding_completed=true
    - Write failure -> persistence_error, nothing else changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: SessionContext, data: OnboardingData
    ) -> Result[ProfileResponse]:
        """
        Execute complete onboarding use case.

        Args:
            session: Authenticated provider
            data: All wizard fields

        Returns:
            Result with the updated ProfileResponse, or Error
            (validation_error carries per-step errors in details)
        """
        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(session.user_id)
            if profile is None:
                return Return.err(Error(PROFILE_NOT_FOUND, "Provider profile not found"))

            if profile.onboarding_completed:
                return Return.err(
                    Error(ONBOARDING_ALREADY_COMPLETED, "Onboarding is already complete")
                )

            invitation = await find_accepted_invitation(self.uow, session.user_id)
            wizard = OnboardingWizard(
                payload_from_invitation(invitation) if invitation is not None else None,
                data,
            )

            errors = wizard.errors_by_step()
            if errors:
                return Return.err(
                    Error(
                        VALIDATION_ERROR,
                        "Onboarding details are incomplete or invalid",
                        details={"errors": errors},
                    )
                )

            for field, value in wizard.build_profile_update().items():
                setattr(profile, field, value)

            try:
                profile = await self.uow.profiles.update(profile)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Failed to complete onboarding for user %s", session.user_id)
                await self.uow.rollback()
                return Return.err(
                    Error(PERSISTENCE_ERROR, "Failed to complete onboarding. Please try again.")
                )

            logger.info(
                "User %s completed onboarding as %s",
                session.user_id,
                wizard.effective_role.value,
            )

            return Return.ok(ProfileResponse.from_profile(profile))
