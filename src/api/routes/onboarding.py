from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.onboarding_status_cache import OnboardingStatusCache
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    ONBOARDING_ALREADY_COMPLETED,
    PROFILE_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.app.use_cases.onboarding import (
    CompleteOnboardingUseCase,
    LoadOnboardingContextUseCase,
    OnboardingPlanResponse,
    StepValidationResponse,
    ValidateOnboardingStepUseCase,
)
from src.app.use_cases.profiles import ProfileResponse
from src.depends import get_current_session, get_onboarding_cache, get_unit_of_work
from src.domain.onboarding import OnboardingData
from src.domain.session_context import SessionContext

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


class ValidateStepRequest(BaseModel):
    step: int = Field(..., ge=1, le=3, description="Wizard step number")
    data: OnboardingData = Field(default_factory=OnboardingData)


@router.get("", status_code=status.HTTP_200_OK, response_model=OnboardingPlanResponse)
async def load_onboarding(
    token: Optional[str] = Query(None, description="Invitation token from the onboarding link"),
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Onboarding

    Accepts the invitation token (once) and returns the wizard plan: two
    steps for invited providers, three for standalone signups.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = LoadOnboardingContextUseCase(uow)
    result = await use_case.execute(session, token)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/validate", status_code=status.HTTP_200_OK, response_model=StepValidationResponse)
async def validate_step(
    request: ValidateStepRequest,
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Validate Onboarding Step

    Evaluates one step of the wizard without saving anything.
    """
    use_case = ValidateOnboardingStepUseCase(uow)
    result = await use_case.execute(session, request.step, request.data)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/complete", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def complete_onboarding(
    request: OnboardingData,
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: OnboardingStatusCache = Depends(get_onboarding_cache),
):
    """
    Complete Onboarding

    Re-validates all steps and writes the provider profile.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: PROFILE_NOT_FOUND
        - 409 Conflict: ONBOARDING_ALREADY_COMPLETED
        - 422 Unprocessable Entity: validation_error (per-step errors in details)
        - 500 Internal Server Error: persistence_error
    """
    use_case = CompleteOnboardingUseCase(uow)
    result = await use_case.execute(session, request)

    if result.is_err():
        error = result.error
        if error.code == VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == PROFILE_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == ONBOARDING_ALREADY_COMPLETED:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    cache.mark_completed(session.user_id)
    return result.value
