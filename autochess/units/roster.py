"""
Roster - uporządkowana drużyna jednostek jednej strony.

Kolejność dodania jest zachowana i wyznacza kolejność ataków
oraz targetingu ("pierwszy żywy w drużynie").

Członkostwo sprawdzane jest po TOŻSAMOŚCI jednostki, nie po
wartości pól. Martwe jednostki zostają w drużynie - alive_units()
za każdym razem liczy widok żywych od nowa.
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Dict, Any

from .unit import Unit


class Roster:
    """
    Drużyna jednostek.

    Attributes:
        _units (List[Unit]): Wszystkie jednostki w kolejności dodania

    Example:
        >>> roster = Roster()
        >>> roster.add(warrior)
        >>> roster.contains(warrior)
        True
        >>> roster.alive_units()
        [Unit(name='Warrior 1', ...)]
    """

    def __init__(self, units: Optional[List[Unit]] = None):
        self._units: List[Unit] = list(units) if units else []

    def add(self, unit: Unit) -> None:
        """
        Dodaje jednostkę na koniec drużyny.

        Brak sprawdzania duplikatów - to robi warstwa rekrutacji.
        """
        self._units.append(unit)

    def contains(self, unit: Unit) -> bool:
        """Sprawdza czy TA SAMA jednostka (tożsamość) jest w drużynie."""
        return any(u is unit for u in self._units)

    def alive_units(self) -> List[Unit]:
        """
        Zwraca żywe jednostki w kolejności dodania.

        Liczone przy każdym wywołaniu (bez cache).
        """
        return [u for u in self._units if u.is_alive()]

    def first_alive(self) -> Optional[Unit]:
        """Zwraca pierwszą żywą jednostkę lub None."""
        return next((u for u in self._units if u.is_alive()), None)

    def has_alive(self) -> bool:
        return self.first_alive() is not None

    def snapshot(self) -> List[Dict[str, Any]]:
        """Zwraca snapshoty wszystkich jednostek."""
        return [u.snapshot() for u in self._units]

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)
