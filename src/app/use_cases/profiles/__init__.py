"""
Provider Profile Use Cases

Profile provisioning, settings edits and the route guard.
"""

from .check_access_use_case import CheckAccessUseCase
from .dtos import (
    GuardAction,
    GuardDecisionResponse,
    ProfileResponse,
    ProvisionProfileResponse,
    UpdateProfileCommand,
)
from .get_profile_use_case import GetProfileUseCase
from .provision_profile_use_case import ProvisionProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase

__all__ = [
    "CheckAccessUseCase",
    "GetProfileUseCase",
    "ProvisionProfileUseCase",
    "UpdateProfileUseCase",
    "GuardAction",
    "GuardDecisionResponse",
    "ProfileResponse",
    "ProvisionProfileResponse",
    "UpdateProfileCommand",
]
