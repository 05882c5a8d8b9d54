from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import ProviderProfile


class IProviderProfileRepository(ABC):
    """ProviderProfile repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[ProviderProfile]:
        """Get profile by authenticated user ID"""
        pass

    @abstractmethod
    async def get_onboarding_completed(self, user_id: UUID) -> Optional[bool]:
        """Read only the onboarding flag; None when the user has no profile"""
        pass

    @abstractmethod
    async def create(self, profile: ProviderProfile) -> ProviderProfile:
        """Create a new profile"""
        pass

    @abstractmethod
    async def update(self, profile: ProviderProfile) -> ProviderProfile:
        """Update existing profile"""
        pass
