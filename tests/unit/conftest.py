import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.invitations = MagicMock()
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_organization_and_email = AsyncMock(return_value=None)
    uow.invitations.get_by_organization_id = AsyncMock(return_value=[])
    uow.invitations.get_latest_accepted_by_user = AsyncMock(return_value=None)
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.mark_accepted = AsyncMock(return_value=True)

    uow.profiles = MagicMock()
    uow.profiles.get_by_user_id = AsyncMock(return_value=None)
    uow.profiles.get_onboarding_completed = AsyncMock(return_value=None)
    uow.profiles.create = AsyncMock(side_effect=lambda profile: profile)
    uow.profiles.update = AsyncMock(side_effect=lambda profile: profile)

    uow.organizations = MagicMock()
    uow.organizations.create = AsyncMock(side_effect=lambda organization: organization)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()

    return uow
