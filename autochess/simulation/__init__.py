"""
Simulation module - stan gry i pętla bitwy.

Zawiera:
- BattleState: Drużyny + pieniądze gracza
- InsufficientFundsError: Brak środków przy odejmowaniu
- Battle: Silnik bitwy (rundy do wyniszczenia jednej strony)
- BattlePhase: Enum stanów bitwy
- resolve_outcome: Reguła wyniku bitwy
"""

from .state import BattleState, InsufficientFundsError, STARTING_MONEY
from .battle import Battle, BattlePhase, resolve_outcome

__all__ = [
    "BattleState", "InsufficientFundsError", "STARTING_MONEY",
    "Battle", "BattlePhase", "resolve_outcome",
]
