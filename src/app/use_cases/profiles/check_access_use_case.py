"""
Check Access Use Case

Route guard for the dashboard: decides whether a navigation renders or
redirects to sign-in / onboarding.
"""

from typing import Optional

from config import ApplicationConfig
from src.libs.result import Result, Return
from src.app.services.onboarding_status_cache import OnboardingStatusCache
from src.app.services.unit_of_work import UnitOfWork
from src.domain.session_context import SessionContext

from .dtos import GuardAction, GuardDecisionResponse


class CheckAccessUseCase:
    """
    Business Rules:
    - No session -> redirect to sign-in
    - Profile missing or onboarding_completed false -> redirect to onboarding
    - Onboarding route itself always renders for signed-in users
    - Completed users are cached by user id, so the flag is read once per
      identity rather than on every navigation
    """

    def __init__(self, uow: UnitOfWork, cache: Optional[OnboardingStatusCache] = None):
        self.uow = uow
        self.cache = cache

    async def execute(
        self, session: Optional[SessionContext], path: str = "/"
    ) -> Result[GuardDecisionResponse]:
        if session is None:
            return Return.ok(
                GuardDecisionResponse(
                    action=GuardAction.redirect,
                    path=path,
                    location=ApplicationConfig.SIGN_IN_PATH,
                    reason="unauthenticated",
                )
            )

        if path.split("?", 1)[0] == ApplicationConfig.ONBOARDING_PATH:
            return Return.ok(GuardDecisionResponse(action=GuardAction.render, path=path))

        if await self.is_onboarded(session):
            return Return.ok(GuardDecisionResponse(action=GuardAction.render, path=path))

        return Return.ok(
            GuardDecisionResponse(
                action=GuardAction.redirect,
                path=path,
                location=ApplicationConfig.ONBOARDING_PATH,
                reason="onboarding_incomplete",
            )
        )

    async def is_onboarded(self, session: SessionContext) -> bool:
        if self.cache is not None and self.cache.is_completed(session.user_id):
            return True

        async with self.uow:
            completed = await self.uow.profiles.get_onboarding_completed(session.user_id)

        if completed and self.cache is not None:
            self.cache.mark_completed(session.user_id)
        return bool(completed)
