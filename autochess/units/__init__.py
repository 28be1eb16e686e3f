"""
Units module - jednostki i drużyny.

Zawiera:
- Unit: Jednostka (wariant zwykły lub smok)
- UnitKind: Enum wariantów
- describe_attack: Opis ataku dla wariantu
- MalformedRecordError: Błąd odczytu rekordu jednostki
- Roster: Uporządkowana drużyna jednostek
"""

from .unit import Unit, UnitKind, describe_attack, MalformedRecordError, ATTACK_TEMPLATES
from .roster import Roster

__all__ = [
    "Unit", "UnitKind", "describe_attack", "MalformedRecordError",
    "ATTACK_TEMPLATES", "Roster",
]
