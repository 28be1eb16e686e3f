"""
Recruitment module - wybór drużyny gracza.

Zawiera:
- RecruitmentFlow: Maszyna stanów rekrutacji
- RecruitmentPhase: Enum stanów (SELECTING, READY)
- parse_selection_token: Token -> indeks w puli
- InvalidSelectionError: Niepoprawny token
- format_pool_menu: Linie menu puli
"""

from .recruitment import (
    RecruitmentFlow,
    RecruitmentPhase,
    InvalidSelectionError,
    parse_selection_token,
    format_pool_menu,
    HERO_COST,
    START_COMMAND,
)

__all__ = [
    "RecruitmentFlow", "RecruitmentPhase", "InvalidSelectionError",
    "parse_selection_token", "format_pool_menu", "HERO_COST", "START_COMMAND",
]
