"""
Provision Profile Use Case

Creates the caller's provider profile on first sign-in.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import EMAIL_REQUIRED
from src.domain.entities import ProviderProfile
from src.domain.session_context import SessionContext

from .dtos import ProfileResponse, ProvisionProfileResponse

logger = logging.getLogger(__name__)


class ProvisionProfileUseCase:
    """
    Idempotent: returns the existing profile when there is one, otherwise
    creates it from the identity on the session with onboarding pending.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: SessionContext) -> Result[ProvisionProfileResponse]:
        async with self.uow:
            existing = await self.uow.profiles.get_by_user_id(session.user_id)
            if existing is not None:
                return Return.ok(
                    ProvisionProfileResponse(
                        created=False, profile=ProfileResponse.from_profile(existing)
                    )
                )

            if not session.email:
                return Return.err(
                    Error(EMAIL_REQUIRED, "Session has no email to provision a profile with")
                )

            profile = ProviderProfile(
                user_id=session.user_id,
                email=session.email.lower(),
                first_name=session.first_name or "",
                last_name=session.last_name or "",
                onboarding_completed=False,
            )
            profile = await self.uow.profiles.create(profile)
            await self.uow.commit()

            logger.info("Provisioned provider profile for user %s", session.user_id)

            return Return.ok(
                ProvisionProfileResponse(
                    created=True, profile=ProfileResponse.from_profile(profile)
                )
            )
