from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ServerError
from src.app.services.onboarding_status_cache import OnboardingStatusCache
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.profiles import CheckAccessUseCase, GuardDecisionResponse
from src.depends import get_onboarding_cache, get_optional_session, get_unit_of_work
from src.domain.session_context import SessionContext

router = APIRouter(tags=["Guard"])


@router.get("/guard", status_code=status.HTTP_200_OK, response_model=GuardDecisionResponse)
async def check_access(
    path: str = Query("/", description="Dashboard path being navigated to"),
    session: Optional[SessionContext] = Depends(get_optional_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: OnboardingStatusCache = Depends(get_onboarding_cache),
):
    """
    Route Guard

    Tells the dashboard whether to render `path` or redirect, to sign-in
    when there is no valid session or to onboarding when it is unfinished.
    """
    use_case = CheckAccessUseCase(uow, cache)
    result = await use_case.execute(session, path)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
