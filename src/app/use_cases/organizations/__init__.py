"""
Organization Use Cases
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .dtos import CreateOrganizationCommand, OrganizationResponse

__all__ = [
    "CreateOrganizationUseCase",
    "CreateOrganizationCommand",
    "OrganizationResponse",
]
