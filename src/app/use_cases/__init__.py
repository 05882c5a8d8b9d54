"""
Use Cases

Organized into domain folders:
- invitations/: Create, list and accept invitations
- onboarding/: Wizard context, step validation, finalization
- profiles/: Provisioning, settings edits, route guard
- organizations/: Organization creation
"""

from .invitations import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    ListInvitationsUseCase,
)
from .onboarding import (
    CompleteOnboardingUseCase,
    LoadOnboardingContextUseCase,
    ValidateOnboardingStepUseCase,
)
from .organizations import CreateOrganizationUseCase
from .profiles import (
    CheckAccessUseCase,
    GetProfileUseCase,
    ProvisionProfileUseCase,
    UpdateProfileUseCase,
)

__all__ = [
    # Invitations
    "AcceptInvitationUseCase",
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    # Onboarding
    "CompleteOnboardingUseCase",
    "LoadOnboardingContextUseCase",
    "ValidateOnboardingStepUseCase",
    # Organizations
    "CreateOrganizationUseCase",
    # Profiles
    "CheckAccessUseCase",
    "GetProfileUseCase",
    "ProvisionProfileUseCase",
    "UpdateProfileUseCase",
]
