from datetime import timedelta

import pytest

from src.app.use_cases.onboarding import LoadOnboardingContextUseCase, ValidateOnboardingStepUseCase
from src.domain.base import utcnow
from src.domain.entities import UserRole
from src.domain.onboarding import OnboardingData
from tests.unit.factories import make_invitation, make_session


@pytest.mark.asyncio
async def test_token_is_accepted_and_plan_has_two_steps(mock_uow):
    session = make_session()
    invitation = make_invitation(token="tok", specialties=["Cardiology"])
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.profiles.get_onboarding_completed.return_value = False

    result = await LoadOnboardingContextUseCase(mock_uow).execute(session, "tok")

    assert result.is_ok()
    plan = result.value
    assert plan.total_steps == 2
    assert [s.number for s in plan.steps] == [1, 2]
    assert plan.invitation.role == UserRole.physician
    assert plan.prefill.specialties == ["Cardiology"]
    assert plan.invitation_error is None
    assert plan.onboarding_completed is False
    mock_uow.invitations.mark_accepted.assert_awaited_once()


@pytest.mark.asyncio
async def test_expired_token_falls_back_to_standalone_plan(mock_uow):
    mock_uow.invitations.get_by_token.return_value = make_invitation(
        token="old", expires_at=utcnow() - timedelta(days=1)
    )

    result = await LoadOnboardingContextUseCase(mock_uow).execute(make_session(), "old")

    assert result.value.total_steps == 3
    assert result.value.invitation is None
    assert result.value.invitation_error == "expired"


@pytest.mark.asyncio
async def test_reload_of_consumed_link_keeps_invited_plan(mock_uow):
    session = make_session()
    invitation = make_invitation(
        token="tok", accepted_at=utcnow(), accepted_by_user_id=session.user_id
    )
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.invitations.get_latest_accepted_by_user.return_value = invitation

    result = await LoadOnboardingContextUseCase(mock_uow).execute(session, "tok")

    assert result.value.total_steps == 2
    assert result.value.invitation_error is None
    mock_uow.invitations.mark_accepted.assert_not_called()


@pytest.mark.asyncio
async def test_no_token_and_no_invitation(mock_uow):
    result = await LoadOnboardingContextUseCase(mock_uow).execute(make_session())

    assert result.value.total_steps == 3
    assert result.value.invitation_error is None
    mock_uow.invitations.get_by_token.assert_not_called()


@pytest.mark.asyncio
async def test_validate_step_uses_accepted_invitation(mock_uow):
    mock_uow.invitations.get_latest_accepted_by_user.return_value = make_invitation(
        role=UserRole.super_admin
    )

    result = await ValidateOnboardingStepUseCase(mock_uow).execute(
        make_session(), 2, OnboardingData()
    )

    assert result.value.valid is True
    assert result.value.total_steps == 2
    assert result.value.effective_role == "super_admin"


@pytest.mark.asyncio
async def test_validate_step_reports_errors(mock_uow):
    result = await ValidateOnboardingStepUseCase(mock_uow).execute(
        make_session(), 1, OnboardingData(professional_email="dr.grey@seattlegrace.org")
    )

    assert result.value.valid is False
    assert result.value.errors == ["Professional phone is required"]
