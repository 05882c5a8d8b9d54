from abc import ABC, abstractmethod

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.provider_profile_repository import IProviderProfileRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    profiles: IProviderProfileRepository
    invitations: IInvitationRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
