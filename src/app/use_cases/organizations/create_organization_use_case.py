"""
Create Organization Use Case

Turns a standalone provider into the owner of a new organization so they can
invite colleagues.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    ALREADY_IN_ORGANIZATION,
    ONBOARDING_INCOMPLETE,
    PROFILE_NOT_FOUND,
    VALIDATION_ERROR,
)
from src.domain.entities import AuditEvent, Organization, UserRole
from src.domain.session_context import SessionContext

from .dtos import CreateOrganizationCommand, OrganizationResponse

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    """
    Business Rules:
    - Caller must have completed onboarding and have no organization yet
    - Caller becomes the organization's super_admin
    - Name defaults to the organization name given during onboarding
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: SessionContext, command: CreateOrganizationCommand
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(session.user_id)
            if profile is None:
                return Return.err(Error(PROFILE_NOT_FOUND, "Provider profile not found"))

            if not profile.onboarding_completed:
                return Return.err(
                    Error(ONBOARDING_INCOMPLETE, "Complete onboarding before creating an organization")
                )

            if profile.organization_id is not None:
                return Return.err(
                    Error(ALREADY_IN_ORGANIZATION, "You already belong to an organization")
                )

            name = command.name.strip() or (profile.organization_name or "").strip()
            if not name:
                return Return.err(
                    Error(
                        VALIDATION_ERROR,
                        "Organization name is required",
                        details={"errors": ["Organization name is required"]},
                    )
                )

            organization = Organization(name=name, account_type=command.account_type)
            organization = await self.uow.organizations.create(organization)

            profile.organization_id = organization.id
            profile.organization_name = organization.name
            profile.role = UserRole.super_admin
            await self.uow.profiles.update(profile)

            audit = AuditEvent(
                organization_id=organization.id,
                user_id=session.user_id,
                action="organization_created",
                event_metadata={
                    "name": organization.name,
                    "account_type": organization.account_type.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info("Organization %s created by user %s", organization.id, session.user_id)

            return Return.ok(
                OrganizationResponse.from_organization(organization, UserRole.super_admin.value)
            )
