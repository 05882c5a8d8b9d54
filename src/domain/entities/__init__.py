"""
Onboarding Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccountType,
    AdminType,
    InvitationStatus,
    SubscriptionStatus,
    UserRole,
)

# Export all entities
from .organization import Organization
from .provider_profile import ProviderProfile
from .invitation import Invitation
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AccountType",
    "AdminType",
    "InvitationStatus",
    "SubscriptionStatus",
    "UserRole",
    # Entities
    "Organization",
    "ProviderProfile",
    "Invitation",
    "AuditEvent",
]
