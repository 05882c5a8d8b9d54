from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    ACCEPTANCE_ERRORS,
    INSUFFICIENT_ROLE,
    INVALID_ROLE,
    INVITE_ALREADY_EXISTS,
    NO_ORGANIZATION,
    ONBOARDING_INCOMPLETE,
    PROFILE_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationCommand,
    CreateInvitationUseCase,
    InvitationListResponse,
    InvitationResponse,
    ListInvitationsUseCase,
)
from src.depends import get_current_session, get_unit_of_work, require_onboarded_profile
from src.domain.session_context import SessionContext
from src.libs.result import Error

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class CreateInvitationRequest(BaseModel):
    """
    Create invitation HTTP request payload

    Role hints (specialties, admin_type) are checked against the role in the
    use case.
    """

    email: str = Field(..., min_length=3, max_length=255, description="Invitee email")
    role: str = Field(..., description="super_admin, physician or administrator")
    specialties: List[str] = Field(default_factory=list, description="Up to 3 specialties")
    admin_type: Optional[str] = Field(None, description="Administrator subtype")


class AcceptInvitationRequest(BaseModel):
    """Accept invitation HTTP request payload"""

    token: str = Field(..., description="Invitation token")
    user_id: Optional[UUID] = Field(
        None, description="Accepting user; must match the signed-in user when given"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse)
async def create_invitation(
    request: CreateInvitationRequest,
    session: SessionContext = Depends(require_onboarded_profile),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invitation

    Invites a provider into the caller's organization and returns the
    onboarding link.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: ONBOARDING_INCOMPLETE, NO_ORGANIZATION, INSUFFICIENT_ROLE
        - 404 Not Found: PROFILE_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_EXISTS
        - 422 Unprocessable Entity: validation_error
        - 500 Internal Server Error: Server error
    """
    use_case = CreateInvitationUseCase(uow)
    result = await use_case.execute(session, CreateInvitationCommand(**request.model_dump()))

    if result.is_err():
        error = result.error
        if error.code == INVALID_ROLE:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code in (ONBOARDING_INCOMPLETE, NO_ORGANIZATION, INSUFFICIENT_ROLE):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == PROFILE_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == INVITE_ALREADY_EXISTS:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=InvitationListResponse)
async def list_invitations(
    session: SessionContext = Depends(require_onboarded_profile),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Invitations

    Invitations of the caller's organization, newest first.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: ONBOARDING_INCOMPLETE, NO_ORGANIZATION, INSUFFICIENT_ROLE
        - 404 Not Found: PROFILE_NOT_FOUND
    """
    use_case = ListInvitationsUseCase(uow)
    result = await use_case.execute(session)

    if result.is_err():
        error = result.error
        if error.code in (NO_ORGANIZATION, INSUFFICIENT_ROLE):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == PROFILE_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
    response_model_exclude_none=True,
)
async def accept_invitation(
    request: AcceptInvitationRequest,
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Consumes the token for the signed-in user. Rejections come back as
    {"success": false, "error": "invalid_token" | "expired" | "already_accepted"}
    with status 200.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: USER_MISMATCH
        - 500 Internal Server Error: Server error
    """
    if request.user_id is not None and request.user_id != session.user_id:
        raise ClientError(
            Error("USER_MISMATCH", "Invitations can only be accepted for yourself"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(request.token, session.user_id)

    if result.is_err():
        error = result.error
        if error.code in ACCEPTANCE_ERRORS:
            return AcceptInvitationResponse.failure(error.code)
        raise ServerError(error)

    return result.value
