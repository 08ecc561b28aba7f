"""Player profiles and skill levels."""

from .models import (
    MAX_SKILL_ORDINAL,
    Player,
    PlayerSubmission,
    SkillLevel,
    SkillStrength,
    from_skill_ordinal,
    skill_ordinal,
)

__all__ = [
    "MAX_SKILL_ORDINAL",
    "Player",
    "PlayerSubmission",
    "SkillLevel",
    "SkillStrength",
    "from_skill_ordinal",
    "skill_ordinal",
]
