from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import PROFILE_NOT_FOUND
from src.domain.session_context import SessionContext

from .dtos import ProfileResponse


class GetProfileUseCase:
    """Loads the caller's own provider profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: SessionContext) -> Result[ProfileResponse]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(session.user_id)
            if profile is None:
                return Return.err(Error(PROFILE_NOT_FOUND, "Provider profile not found"))

            return Return.ok(ProfileResponse.from_profile(profile))
