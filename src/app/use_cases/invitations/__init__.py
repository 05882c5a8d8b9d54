"""
Invitation Use Cases

Creating, listing and accepting organization invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    CreateInvitationCommand,
    InvitationListResponse,
    InvitationResponse,
)
from .list_invitations_use_case import ListInvitationsUseCase

__all__ = [
    "AcceptInvitationUseCase",
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "AcceptInvitationResponse",
    "CreateInvitationCommand",
    "InvitationListResponse",
    "InvitationResponse",
]
