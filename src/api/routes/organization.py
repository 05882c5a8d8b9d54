from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    ALREADY_IN_ORGANIZATION,
    ONBOARDING_INCOMPLETE,
    PROFILE_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.app.use_cases.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    OrganizationResponse,
)
from src.depends import get_unit_of_work, require_onboarded_profile
from src.domain.session_context import SessionContext

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrganizationResponse)
async def create_organization(
    request: CreateOrganizationCommand,
    session: SessionContext = Depends(require_onboarded_profile),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    Creates an organization and makes the caller its super admin.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: ONBOARDING_INCOMPLETE
        - 404 Not Found: PROFILE_NOT_FOUND
        - 409 Conflict: ALREADY_IN_ORGANIZATION
        - 422 Unprocessable Entity: validation_error
    """
    use_case = CreateOrganizationUseCase(uow)
    result = await use_case.execute(session, request)

    if result.is_err():
        error = result.error
        if error.code == ONBOARDING_INCOMPLETE:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == PROFILE_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == ALREADY_IN_ORGANIZATION:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
