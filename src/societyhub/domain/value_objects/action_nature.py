"""Activity log action nature."""

from enum import StrEnum


class ActionNature(StrEnum):
    """How an activity affects the society."""

    CONSTRUCTIVE = "CONSTRUCTIVE"
    NEUTRAL = "NEUTRAL"
    DESTRUCTIVE = "DESTRUCTIVE"
    ADMINISTRATIVE = "ADMINISTRATIVE"
