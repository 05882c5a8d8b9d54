from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.organization_repository import IOrganizationRepository
from src.domain.entities import Organization


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        self.session.add(organization)
        await self.session.flush()
        await self.session.refresh(organization)
        return organization
