from uuid import uuid4

import pytest

from src.app.services.onboarding_status_cache import OnboardingStatusCache
from src.app.use_cases.profiles import CheckAccessUseCase, GuardAction
from tests.unit.factories import make_session


@pytest.mark.asyncio
async def test_no_session_redirects_to_sign_in(mock_uow):
    result = await CheckAccessUseCase(mock_uow).execute(None, "/dashboard")

    decision = result.value
    assert decision.action == GuardAction.redirect
    assert decision.location == "/auth"
    assert decision.reason == "unauthenticated"
    mock_uow.profiles.get_onboarding_completed.assert_not_called()


@pytest.mark.asyncio
async def test_incomplete_onboarding_redirects(mock_uow):
    mock_uow.profiles.get_onboarding_completed.return_value = False

    result = await CheckAccessUseCase(mock_uow).execute(make_session(), "/dashboard")

    assert result.value.action == GuardAction.redirect
    assert result.value.location == "/onboarding"


@pytest.mark.asyncio
async def test_missing_profile_redirects_to_onboarding(mock_uow):
    mock_uow.profiles.get_onboarding_completed.return_value = None

    result = await CheckAccessUseCase(mock_uow).execute(make_session(), "/patients")

    assert result.value.location == "/onboarding"


@pytest.mark.asyncio
async def test_onboarding_route_always_renders(mock_uow):
    result = await CheckAccessUseCase(mock_uow).execute(make_session(), "/onboarding?token=abc")

    assert result.value.action == GuardAction.render
    mock_uow.profiles.get_onboarding_completed.assert_not_called()


@pytest.mark.asyncio
async def test_completed_flag_is_read_once_per_user(mock_uow):
    cache = OnboardingStatusCache()
    session = make_session()
    mock_uow.profiles.get_onboarding_completed.return_value = True
    use_case = CheckAccessUseCase(mock_uow, cache)

    first = await use_case.execute(session, "/dashboard")
    second = await use_case.execute(session, "/settings")

    assert first.value.action == GuardAction.render
    assert second.value.action == GuardAction.render
    assert mock_uow.profiles.get_onboarding_completed.await_count == 1

    await use_case.execute(make_session(), "/dashboard")
    assert mock_uow.profiles.get_onboarding_completed.await_count == 2


@pytest.mark.asyncio
async def test_incomplete_flag_is_not_cached(mock_uow):
    cache = OnboardingStatusCache()
    session = make_session()
    mock_uow.profiles.get_onboarding_completed.return_value = False
    use_case = CheckAccessUseCase(mock_uow, cache)

    await use_case.execute(session, "/dashboard")
    mock_uow.profiles.get_onboarding_completed.return_value = True
    result = await use_case.execute(session, "/dashboard")

    assert result.value.action == GuardAction.render
    assert len(cache) == 1


def test_cache_evicts_oldest_entries():
    cache = OnboardingStatusCache(max_entries=2)
    first, second, third = uuid4(), uuid4(), uuid4()

    cache.mark_completed(first)
    cache.mark_completed(second)
    cache.mark_completed(third)

    assert not cache.is_completed(first)
    assert cache.is_completed(second)
    assert cache.is_completed(third)
