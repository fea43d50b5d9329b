"""Tests for founder access checks and premium plan helpers."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from conftest import FOUNDER_ID, MEMBER_ID
from core.domain.models import Profile, ProfileTier
from core.utils.premium import is_pro, requires_pro

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
UNKNOWN_ID = UUID("33333333-3333-3333-3333-333333333333")


# =============================================================================
# AccessService
# =============================================================================

class TestFounderAccess:

    @pytest.mark.asyncio
    async def test_founder_may_render(self, services):
        assert await services.access.is_founder(FOUNDER_ID) is True
        assert await services.access.founder_redirect(FOUNDER_ID) is None
        assert await services.access.check_founder(FOUNDER_ID) is None

    @pytest.mark.asyncio
    async def test_anonymous_goes_to_login(self, services):
        assert await services.access.founder_redirect(None) == "/auth/login"
        assert await services.access.check_founder(None) == 401

    @pytest.mark.asyncio
    async def test_member_goes_home(self, services):
        assert await services.access.founder_redirect(MEMBER_ID) == "/"
        assert await services.access.check_founder(MEMBER_ID) == 403

    @pytest.mark.asyncio
    async def test_user_without_profile_is_not_founder(self, services):
        assert await services.access.is_founder(UNKNOWN_ID) is False
        assert await services.access.check_founder(UNKNOWN_ID) == 403


# =============================================================================
# Premium
# =============================================================================

def profile(tier: ProfileTier, expires_at=None) -> Profile:
    return Profile(id=MEMBER_ID, plan_tier=tier, plan_expires_at=expires_at)


@pytest.mark.parametrize("subject, expected", [
    (None, False),
    (profile(ProfileTier.FREE), False),
    (profile(ProfileTier.FOUNDER), False),
    (profile(ProfileTier.PRO), True),
    (profile(ProfileTier.PRO, NOW + timedelta(days=1)), True),
    (profile(ProfileTier.PRO, NOW - timedelta(seconds=1)), False),
])
def test_is_pro(subject, expected):
    assert is_pro(subject, now=NOW) is expected


def test_is_pro_treats_naive_expiry_as_utc():
    naive_future = datetime(2025, 6, 2, 0, 0)
    naive_past = datetime(2025, 5, 31, 0, 0)

    assert is_pro(profile(ProfileTier.PRO, naive_future), now=NOW) is True
    assert is_pro(profile(ProfileTier.PRO, naive_past), now=NOW) is False


@pytest.mark.parametrize("feature, expected", [
    ("collections", True),
    ("lobby_boost", True),
    ("advanced_filters", True),
    ("join_lobby", False),
    ("", False),
])
def test_requires_pro(feature, expected):
    assert requires_pro(feature) is expected
