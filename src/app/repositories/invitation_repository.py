from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_organization_and_email(
        self, organization_id: UUID, email: str, now: datetime
    ) -> Optional[Invitation]:
        """Get an unaccepted, unexpired invitation for an email in an organization"""
        pass

    @abstractmethod
    async def get_by_organization_id(self, organization_id: UUID) -> List[Invitation]:
        """Get all invitations for an organization, newest first"""
        pass

    @abstractmethod
    async def get_latest_accepted_by_user(self, user_id: UUID) -> Optional[Invitation]:
        """Get the most recent invitation accepted by a user"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_accepted(
        self, invitation_id: UUID, user_id: UUID, accepted_at: datetime
    ) -> bool:
        """
        Set accepted_at/accepted_by only if the invitation is still unaccepted.

        Returns False when another caller accepted it first.
        """
        pass
