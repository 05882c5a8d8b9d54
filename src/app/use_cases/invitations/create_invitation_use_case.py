"""
Create Invitation Use Case

Handles inviting providers to join the inviter's organization.
"""

import logging
import secrets
from datetime import timedelta
from typing import List

from config import ApplicationConfig
from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    INSUFFICIENT_ROLE,
    INVALID_ROLE,
    INVITE_ALREADY_EXISTS,
    NO_ORGANIZATION,
    ONBOARDING_INCOMPLETE,
    PROFILE_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.domain.base import utcnow
from src.domain.entities import AdminType, AuditEvent, Invitation, UserRole
from src.domain.session_context import SessionContext
from src.domain.validation import validate_specialties

from .dtos import CreateInvitationCommand, InvitationResponse

logger = logging.getLogger(__name__)

INVITING_ROLES = (UserRole.super_admin, UserRole.administrator)


class CreateInvitationUseCase:
    """
    Use case for inviting a provider into an organization.

    Business Rules:
    - Inviter must have finished onboarding and belong to an organization
    - Only super_admin/administrator can invite; only super_admin can
      invite another super_admin
    - Physicians: up to 3 distinct catalogue specialties
    - Administrators: admin subtype required
    - One pending invitation per email per organization
    - Token is single-use, cryptographically secure
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork, ttl_days: int = ApplicationConfig.INVITATION_TTL_DAYS):
        self.uow = uow
        self.ttl_days = ttl_days

    async def execute(
        self, session: SessionContext, command: CreateInvitationCommand
    ) -> Result[InvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            session: Authenticated inviter
            command: Email, role and role hints for the invitee

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        try:
            role = UserRole(command.role)
        except ValueError:
            return Return.err(
                Error(
                    INVALID_ROLE,
                    f"Invalid role: {command.role}. Must be one of: "
                    + ", ".join(r.value for r in UserRole),
                )
            )

        errors = self._validate_role_hints(role, command)
        if errors:
            return Return.err(
                Error(VALIDATION_ERROR, "Invitation is invalid", details={"errors": errors})
            )

        async with self.uow:
            inviter = await self.uow.profiles.get_by_user_id(session.user_id)
            if inviter is None:
                return Return.err(Error(PROFILE_NOT_FOUND, "Provider profile not found"))

            if not inviter.onboarding_completed:
                return Return.err(
                    Error(ONBOARDING_INCOMPLETE, "Complete onboarding before inviting others")
                )

            if inviter.organization_id is None:
                return Return.err(
                    Error(NO_ORGANIZATION, "You do not belong to an organization")
                )

            if inviter.role not in INVITING_ROLES or (
                role == UserRole.super_admin and inviter.role != UserRole.super_admin
            ):
                return Return.err(
                    Error(INSUFFICIENT_ROLE, "You are not allowed to send this invitation")
                )

            email = command.email.strip().lower()
            now = utcnow()

            pending = await self.uow.invitations.get_pending_by_organization_and_email(
                inviter.organization_id, email, now
            )
            if pending:
                return Return.err(
                    Error(
                        INVITE_ALREADY_EXISTS,
                        "A pending invitation already exists for this email",
                    )
                )

            invitation = Invitation(
                organization_id=inviter.organization_id,
                email=email,
                invited_role=role,
                specialties=list(command.specialties) if role == UserRole.physician else None,
                admin_type=(
                    AdminType(command.admin_type) if role == UserRole.administrator else None
                ),
                invited_by_user_id=session.user_id,
                token=secrets.token_urlsafe(32),
                created_at=now,
                expires_at=now + timedelta(days=self.ttl_days),
            )
            invitation = await self.uow.invitations.create(invitation)

            audit = AuditEvent(
                organization_id=inviter.organization_id,
                user_id=session.user_id,
                action="invite_sent",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": email,
                    "role": role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                "Invitation %s created in organization %s for role %s",
                invitation.id,
                inviter.organization_id,
                role.value,
            )

            return Return.ok(InvitationResponse.from_invitation(invitation, now))

    @staticmethod
    def _validate_role_hints(role: UserRole, command: CreateInvitationCommand) -> List[str]:
        errors = []

        if role == UserRole.physician:
            errors.extend(validate_specialties(command.specialties))
        elif command.specialties:
            errors.append("Specialties only apply to physician invitations")

        if role == UserRole.administrator:
            if not command.admin_type:
                errors.append("Administrator type is required")
            elif command.admin_type not in {t.value for t in AdminType}:
                errors.append(f"Unknown administrator type: {command.admin_type}")
        elif command.admin_type:
            errors.append("Administrator type only applies to administrator invitations")

        return errors
