"""
Error codes shared across use cases.

Acceptance failures and the two onboarding failures form the flat taxonomy
the dashboard renders; the rest are ordinary request errors.
"""

# Invitation acceptance (returned as structured payloads, not HTTP errors)
INVALID_TOKEN = "invalid_token"
EXPIRED = "expired"
ALREADY_ACCEPTED = "already_accepted"

ACCEPTANCE_ERRORS = (INVALID_TOKEN, EXPIRED, ALREADY_ACCEPTED)

# Onboarding
VALIDATION_ERROR = "validation_error"
PERSISTENCE_ERROR = "persistence_error"

# Request errors
PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
ONBOARDING_INCOMPLETE = "ONBOARDING_INCOMPLETE"
ONBOARDING_ALREADY_COMPLETED = "ONBOARDING_ALREADY_COMPLETED"
NO_ORGANIZATION = "NO_ORGANIZATION"
ALREADY_IN_ORGANIZATION = "ALREADY_IN_ORGANIZATION"
INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"
INVALID_ROLE = "INVALID_ROLE"
INVITE_ALREADY_EXISTS = "INVITE_ALREADY_EXISTS"
EMAIL_REQUIRED = "EMAIL_REQUIRED"
