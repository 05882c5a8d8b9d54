"""
Onboarding Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role a provider holds within an organization"""

    super_admin = "super_admin"
    physician = "physician"
    administrator = "administrator"


class AdminType(str, Enum):
    """Administrator subtype"""

    office_admin = "office_admin"
    nurse_rn = "nurse_rn"
    other = "other"


class AccountType(str, Enum):
    """Organization account tier"""

    small_practice = "small_practice"
    enterprise_practice = "enterprise_practice"
    hospital = "hospital"


class SubscriptionStatus(str, Enum):
    """Organization subscription status"""

    active = "active"
    suspended = "suspended"
    cancelled = "cancelled"
    trial = "trial"


class InvitationStatus(str, Enum):
    """Derived invitation status (not stored)"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"
