from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.provider_profile_repository import IProviderProfileRepository
from src.domain.base import utcnow
from src.domain.entities import ProviderProfile


class ProviderProfileRepository(IProviderProfileRepository):
    """ProviderProfile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[ProviderProfile]:
        """Get profile by authenticated user ID"""
        stmt = select(ProviderProfile).where(ProviderProfile.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_onboarding_completed(self, user_id: UUID) -> Optional[bool]:
        """Read only the onboarding flag"""
        stmt = select(ProviderProfile.onboarding_completed).where(
            ProviderProfile.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, profile: ProviderProfile) -> ProviderProfile:
        """Create a new profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def update(self, profile: ProviderProfile) -> ProviderProfile:
        """Update existing profile (one UPDATE of its row on flush)"""
        profile.updated_at = utcnow()
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
