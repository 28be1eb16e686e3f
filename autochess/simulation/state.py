"""
BattleState - stan gry współdzielony przez rekrutację i bitwę.

Jeden obiekt, przekazywany jawnie (bez globali):
- drużyna gracza (Roster)
- drużyna wroga (Roster)
- pieniądze gracza

Niezmiennik:
    Pieniądze nigdy nie spadają poniżej zera. Odjęcie większej kwoty
    niż saldo jest odrzucane w całości (InsufficientFundsError),
    saldo zostaje bez zmian.
"""

from __future__ import annotations
from typing import Optional

from ..units.roster import Roster

STARTING_MONEY = 250


class InsufficientFundsError(ValueError):
    """Próba wydania więcej pieniędzy niż gracz posiada."""

    def __init__(self, amount: int, balance: int):
        super().__init__(f"Not enough money: need {amount}, have {balance}.")
        self.amount = amount
        self.balance = balance


class BattleState:
    """
    Stan gry.

    Attributes:
        player_units (Roster): Drużyna gracza
        enemy_units (Roster): Drużyna wroga
        money (int): Saldo gracza (tylko do odczytu - zmiany przez deduct_money)

    Example:
        >>> state = BattleState()
        >>> state.deduct_money(50)
        >>> state.money
        200
        >>> state.deduct_money(500)
        Traceback (most recent call last):
        InsufficientFundsError: Not enough money: need 500, have 200.
    """

    def __init__(
        self,
        money: int = STARTING_MONEY,
        player_units: Optional[Roster] = None,
        enemy_units: Optional[Roster] = None,
    ):
        """
        Inicjalizuje stan gry.

        Args:
            money: Budżet startowy (>= 0)
            player_units: Drużyna gracza (pusta jeśli None)
            enemy_units: Drużyna wroga (pusta jeśli None)

        Raises:
            ValueError: Ujemny budżet startowy
        """
        if money < 0:
            raise ValueError(f"Starting money cannot be negative: {money}")

        self.player_units = player_units if player_units is not None else Roster()
        self.enemy_units = enemy_units if enemy_units is not None else Roster()
        self._money = money

    @property
    def money(self) -> int:
        """Aktualne saldo gracza."""
        return self._money

    def deduct_money(self, amount: int) -> None:
        """
        Odejmuje kwotę od salda.

        Args:
            amount: Kwota do odjęcia (>= 0)

        Raises:
            InsufficientFundsError: amount > saldo (saldo bez zmian)
            ValueError: Ujemna kwota
        """
        if amount < 0:
            raise ValueError(f"Cannot deduct a negative amount: {amount}")
        if amount > self._money:
            raise InsufficientFundsError(amount, self._money)
        self._money -= amount
