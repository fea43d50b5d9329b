"""
Endorsement awards players can give each other after a session.
The set is closed: every AwardType has exactly one config.
"""

from typing import List, Union

from core.domain.models import AwardConfig, AwardType


AWARD_CONFIGS = {
    AwardType.GOOD_TEAMMATE: AwardConfig(
        type=AwardType.GOOD_TEAMMATE,
        label="Good Teammate",
        short_label="GT",
        emoji="\U0001f91d",
        description="Reliable and cooperative player",
    ),
    AwardType.STRATEGIC: AwardConfig(
        type=AwardType.STRATEGIC,
        label="Strategic",
        short_label="ST",
        emoji="\U0001f9e0",
        description="Great game sense and tactics",
    ),
    AwardType.FRIENDLY: AwardConfig(
        type=AwardType.FRIENDLY,
        label="Friendly",
        short_label="FR",
        emoji="\U0001f60a",
        description="Positive and welcoming",
    ),
    AwardType.CHILL: AwardConfig(
        type=AwardType.CHILL,
        label="Chill",
        short_label="CH",
        emoji="\U0001f60e",
        description="Relaxed and easy-going",
    ),
}


def get_award_config(award_type: Union[AwardType, str]) -> AwardConfig:
    """Look up display config for an award. Raises ValueError for unknown strings."""
    return AWARD_CONFIGS[AwardType(award_type)]


def get_all_award_types() -> List[AwardType]:
    return list(AWARD_CONFIGS.keys())
