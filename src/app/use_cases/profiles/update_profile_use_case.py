"""
Update Profile Use Case

Settings-page edits of the caller's own profile.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import PERSISTENCE_ERROR, PROFILE_NOT_FOUND, VALIDATION_ERROR
from src.domain.session_context import SessionContext
from src.domain.validation import validate_professional_email

from .dtos import ProfileResponse, UpdateProfileCommand

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Business Rules:
    - Only fields present in the command are written
    - role, organization and onboarding_completed are never touched here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: SessionContext, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        changes = command.model_dump(exclude_unset=True)

        if changes.get("professional_email") is not None:
            errors = validate_professional_email(changes["professional_email"])
            if errors:
                return Return.err(
                    Error(VALIDATION_ERROR, "Profile is invalid", details={"errors": errors})
                )

        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(session.user_id)
            if profile is None:
                return Return.err(Error(PROFILE_NOT_FOUND, "Provider profile not found"))

            for field, value in changes.items():
                setattr(profile, field, value)

            try:
                profile = await self.uow.profiles.update(profile)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Failed to update profile for user %s", session.user_id)
                await self.uow.rollback()
                return Return.err(Error(PERSISTENCE_ERROR, "Failed to save profile"))

            return Return.ok(ProfileResponse.from_profile(profile))
