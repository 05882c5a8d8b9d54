"""
Organization Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel

from src.domain.entities import AccountType, Organization


class CreateOrganizationCommand(BaseModel):
    name: str
    account_type: AccountType = AccountType.small_practice


class OrganizationResponse(BaseModel):
    id: str
    name: str
    account_type: str
    subscription_status: str
    role: str

    @classmethod
    def from_organization(cls, organization: Organization, role: str) -> "OrganizationResponse":
        return cls(
            id=str(organization.id),
            name=organization.name,
            account_type=organization.account_type.value,
            subscription_status=organization.subscription_status.value,
            role=role,
        )
