from fastapi import APIRouter, Depends, Response, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import EMAIL_REQUIRED, PROFILE_NOT_FOUND, VALIDATION_ERROR
from src.app.use_cases.profiles import (
    GetProfileUseCase,
    ProfileResponse,
    ProvisionProfileResponse,
    ProvisionProfileUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.depends import get_current_session, get_unit_of_work
from src.domain.session_context import SessionContext

router = APIRouter(prefix="/profiles", tags=["Profile"])


@router.post("/me", response_model=ProvisionProfileResponse)
async def provision_profile(
    response: Response,
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Provision Profile

    Called after sign-up/sign-in. Creates the caller's profile from the token
    identity on first call (201) and returns the existing one afterwards (200).

    Raises:
        - 400 Bad Request: EMAIL_REQUIRED
        - 401 Unauthorized: Invalid or expired token
    """
    use_case = ProvisionProfileUseCase(uow)
    result = await use_case.execute(session)

    if result.is_err():
        error = result.error
        if error.code == EMAIL_REQUIRED:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    response.status_code = (
        status.HTTP_201_CREATED if result.value.created else status.HTTP_200_OK
    )
    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Profile

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: PROFILE_NOT_FOUND
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(session)

    if result.is_err():
        error = result.error
        if error.code == PROFILE_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.patch("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileCommand,
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Profile

    Settings edits. Role, organization and onboarding state are not editable.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 404 Not Found: PROFILE_NOT_FOUND
        - 422 Unprocessable Entity: validation_error
        - 500 Internal Server Error: persistence_error
    """
    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(session, request)

    if result.is_err():
        error = result.error
        if error.code == VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == PROFILE_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
