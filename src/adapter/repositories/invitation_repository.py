from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_organization_and_email(
        self, organization_id: UUID, email: str, now: datetime
    ) -> Optional[Invitation]:
        """Get an unaccepted, unexpired invitation for an email in an organization"""
        stmt = select(Invitation).where(
            Invitation.organization_id == organization_id,
            Invitation.email == email,
            Invitation.accepted_at.is_(None),
            Invitation.expires_at >= now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_organization_id(self, organization_id: UUID) -> List[Invitation]:
        """Get all invitations for an organization, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.organization_id == organization_id)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_latest_accepted_by_user(self, user_id: UUID) -> Optional[Invitation]:
        """Get the most recent invitation accepted by a user"""
        stmt = (
            select(Invitation)
            .where(Invitation.accepted_by_user_id == user_id)
            .order_by(Invitation.accepted_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_accepted(
        self, invitation_id: UUID, user_id: UUID, accepted_at: datetime
    ) -> bool:
        """Conditional update: only the first caller sees a matched row"""
        stmt = (
            update(Invitation)
            .where(Invitation.id == invitation_id, Invitation.accepted_at.is_(None))
            .values(
                accepted_at=accepted_at,
                accepted_by_user_id=user_id,
                updated_at=accepted_at,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
