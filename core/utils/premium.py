"""
Premium plan helpers.
"""

from datetime import datetime, timezone
from typing import Optional

from core.domain.constants import PRO_FEATURES
from core.domain.models import Profile, ProfileTier


def is_pro(profile: Optional[Profile], now: Optional[datetime] = None) -> bool:
    """True if the profile has a Pro plan that hasn't expired"""
    if not profile:
        return False

    if profile.plan_tier != ProfileTier.PRO:
        return False

    if profile.plan_expires_at:
        now = now or datetime.now(timezone.utc)
        expires_at = profile.plan_expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at < now:
            return False

    return True


def requires_pro(feature: str) -> bool:
    return feature in PRO_FEATURES
