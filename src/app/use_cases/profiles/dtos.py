"""
Profile Use Case DTOs (Data Transfer Objects)
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import ProviderProfile


# ============================================================================
# Command DTOs
# ============================================================================


class UpdateProfileCommand(BaseModel):
    """
    Settings-page edits. Role, organization and the onboarding flag are not
    editable here.
    """

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=32)
    professional_email: Optional[str] = Field(None, max_length=255)
    professional_phone: Optional[str] = Field(None, max_length=32)
    department: Optional[str] = Field(None, max_length=255)


# ============================================================================
# Response DTOs
# ============================================================================


class ProfileResponse(BaseModel):
    """Provider profile"""

    id: str
    user_id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: Optional[str] = None
    organization_id: Optional[str] = None
    organization_name: Optional[str] = None
    professional_email: Optional[str] = None
    professional_phone: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    specialty: Optional[str] = None
    npi_number: Optional[str] = None
    admin_type: Optional[str] = None
    department: Optional[str] = None
    onboarding_completed: bool

    @classmethod
    def from_profile(cls, profile: ProviderProfile) -> "ProfileResponse":
        return cls(
            id=str(profile.id),
            user_id=str(profile.user_id),
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            phone=profile.phone,
            role=profile.role.value if profile.role else None,
            organization_id=str(profile.organization_id) if profile.organization_id else None,
            organization_name=profile.organization_name,
            professional_email=profile.professional_email,
            professional_phone=profile.professional_phone,
            specialties=list(profile.specialties or []),
            specialty=profile.specialty,
            npi_number=profile.npi_number,
            admin_type=profile.admin_type.value if profile.admin_type else None,
            department=profile.department,
            onboarding_completed=bool(profile.onboarding_completed),
        )


class ProvisionProfileResponse(BaseModel):
    """Profile plus whether this call created it"""

    created: bool
    profile: ProfileResponse


class GuardAction(str, Enum):
    render = "render"
    redirect = "redirect"


class GuardDecisionResponse(BaseModel):
    """What the dashboard should do with a navigation to `path`"""

    action: GuardAction
    path: str
    location: Optional[str] = None
    reason: Optional[str] = None
