"""
Unit - jednostka walcząca w bitwie.

Jednostka to tylko cztery pola: nazwa, HP, obrażenia i flaga życia.
Wariant (zwykła jednostka / smok) zmienia WYŁĄCZNIE opis ataku
w logu - mechanika obrażeń jest identyczna.

Cykl życia jednostki:
═══════════════════════════════════════════════════════════════════

    1. TWORZENIE
       - Z definicji YAML (ConfigLoader.load_unit -> Unit.from_config)
       - Albo z rekordu tekstowego (Unit.from_record)

    2. WALKA
       - attack(target) - zadaje `damage` celowi
       - take_damage(amount) - odejmuje HP (bez clampowania do 0)

    3. ŚMIERĆ
       - HP <= 0 -> alive = False (dokładnie raz, bez wskrzeszania)
       - Jednostka ZOSTAJE w swojej drużynie, jest tylko
         odfiltrowywana przez Roster.alive_units()

Tożsamość:
    Jednostki są porównywane po TOŻSAMOŚCI (`is`), nie po wartości.
    Dwie jednostki "Warrior 1" o tych samych statach to dwie różne
    jednostki.

Format rekordu:
═══════════════════════════════════════════════════════════════════

    name,health,damage,alive

    Przykład: "Warrior 1,100,20,True"

    Wariant (smok) nie jest zapisywany - odczytany rekord zawsze
    daje zwykłą jednostkę.

Przykład użycia:
    >>> warrior = Unit("Warrior 1", health=100, damage=20)
    >>> dragon = Unit.dragon("Dragon 1", health=150, damage=30)
    >>> dragon.attack(warrior)
    True
    >>> warrior.health
    70
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, TYPE_CHECKING
import re

if TYPE_CHECKING:
    from ..events.event_logger import EventLogger


class UnitKind(Enum):
    """Wariant jednostki - decyduje tylko o opisie ataku."""

    UNIT = "unit"
    DRAGON = "dragon"


ATTACK_TEMPLATES: Dict[UnitKind, str] = {
    UnitKind.UNIT: "{attacker} attacks {target} for {damage} damage!",
    UnitKind.DRAGON: "{attacker} shoots a fireball at {target} for {damage} damage!",
}


def describe_attack(kind: UnitKind, attacker: str, target: str, damage: int) -> str:
    """
    Zwraca linię logu opisującą atak danego wariantu.

    Args:
        kind: Wariant atakującego
        attacker: Nazwa atakującego
        target: Nazwa celu
        damage: Zadane obrażenia

    Returns:
        str: Gotowa linia tekstu
    """
    return ATTACK_TEMPLATES[kind].format(attacker=attacker, target=target, damage=damage)


class MalformedRecordError(ValueError):
    """Rekord jednostki nie ma formatu `name,health,damage,alive`."""


RECORD_FIELDS = 4
_INT_RE = re.compile(r"[+-]?[0-9]+")
_BOOL_VALUES = {"true": True, "false": False}


@dataclass(eq=False)
class Unit:
    """
    Jednostka walcząca.

    Attributes:
        name (str): Nazwa wyświetlana w logach
        health (int): Aktualne HP (może spaść poniżej 0)
        damage (int): Obrażenia zadawane jednym atakiem (stałe)
        kind (UnitKind): Wariant - tylko opis ataku
        alive (bool): Czy jednostka żyje

    Note:
        - eq=False: porównanie i hash po tożsamości obiektu
        - alive jest False zawsze gdy health <= 0
    """

    name: str
    health: int
    damage: int
    kind: UnitKind = UnitKind.UNIT
    alive: bool = True

    def __post_init__(self) -> None:
        if self.damage <= 0:
            raise ValueError(f"Unit '{self.name}' must deal positive damage, got {self.damage}")
        if self.health <= 0:
            self.alive = False
        elif not self.alive:
            raise ValueError(f"Unit '{self.name}' has {self.health} health but is marked dead")

    # ─────────────────────────────────────────────────────────────────────────
    # FACTORY METHODS
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def dragon(cls, name: str, health: int, damage: int) -> "Unit":
        """Tworzy smoka (jednostkę z opisem ataku kulą ognia)."""
        return cls(name=name, health=health, damage=damage, kind=UnitKind.DRAGON)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Unit":
        """
        Tworzy jednostkę z konfiguracji (słownika z ConfigLoader).

        Args:
            config: Słownik z load_unit() (zawiera defaults)

        Returns:
            Unit: Nowa, żywa jednostka

        Raises:
            ValueError: Nieznany `kind` albo obrażenia <= 0

        Example:
            >>> config = loader.load_unit("dragon_1")
            >>> unit = Unit.from_config(config)
            >>> unit.kind
            <UnitKind.DRAGON: 'dragon'>
        """
        unit_id = config.get("id", "unknown")
        return cls(
            name=config.get("name", unit_id.replace("_", " ").title()),
            health=int(config["health"]),
            damage=int(config["damage"]),
            kind=UnitKind(config.get("kind", UnitKind.UNIT.value)),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # STAN I ŻYCIE
    # ─────────────────────────────────────────────────────────────────────────

    def is_alive(self) -> bool:
        """Sprawdza czy jednostka żyje."""
        return self.alive

    def is_dead(self) -> bool:
        """Sprawdza czy jednostka jest martwa."""
        return not self.alive

    def is_dragon(self) -> bool:
        return self.kind is UnitKind.DRAGON

    # ─────────────────────────────────────────────────────────────────────────
    # COMBAT
    # ─────────────────────────────────────────────────────────────────────────

    def attack(self, target: Optional["Unit"], logger: Optional["EventLogger"] = None) -> bool:
        """
        Atakuje cel za `damage` obrażeń.

        Martwy atakujący albo brak celu -> nic się nie dzieje.
        Linia ataku jest logowana przed obrażeniami, więc ewentualna
        śmierć celu pojawia się w logu zaraz po niej.

        Args:
            target: Cel ataku (None = brak celu)
            logger: Opcjonalny logger zdarzeń

        Returns:
            bool: True jeśli atak został wykonany
        """
        if not self.alive or target is None:
            return False

        if logger is not None:
            logger.log_attack(
                describe_attack(self.kind, self.name, target.name, self.damage),
                unit_id=self.name,
                target_id=target.name,
                damage=self.damage,
                kind=self.kind.value,
                health_after=target.health - self.damage,
            )

        target.take_damage(self.damage, logger)
        return True

    def take_damage(self, amount: int, logger: Optional["EventLogger"] = None) -> bool:
        """
        Odejmuje HP. HP może zejść poniżej zera.

        Args:
            amount: Ilość obrażeń
            logger: Opcjonalny logger zdarzeń

        Returns:
            bool: True jeśli ten cios zabił jednostkę
        """
        self.health -= amount

        # Śmierć tylko raz - kolejne ciosy w trupa nic nie zmieniają
        if self.health <= 0 and self.alive:
            self.alive = False
            if logger is not None:
                logger.log_death(self.name, self.health)
            return True

        return False

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Zwraca słownik ze stanem jednostki (do logu JSON)."""
        return {
            "name": self.name,
            "health": self.health,
            "damage": self.damage,
            "kind": self.kind.value,
            "alive": self.alive,
        }

    def to_record(self) -> str:
        """
        Zapisuje jednostkę jako `name,health,damage,alive`.

        Raises:
            ValueError: Nazwa zawiera przecinek (rekordu nie dałoby się odczytać)
        """
        if "," in self.name:
            raise ValueError(f"Unit name '{self.name}' cannot contain a comma")
        return f"{self.name},{self.health},{self.damage},{self.alive}"

    @classmethod
    def from_record(cls, data: str) -> "Unit":
        """
        Odtwarza jednostkę z rekordu `name,health,damage,alive`.

        HP i obrażenia: liczby całkowite (opcjonalny znak, spacje wokół).
        alive: true/false bez względu na wielkość liter.

        Args:
            data: Rekord tekstowy

        Returns:
            Unit: Zwykła jednostka (UnitKind.UNIT)

        Raises:
            MalformedRecordError: Zła liczba pól lub zły typ pola
        """
        parts = data.split(",")
        if len(parts) != RECORD_FIELDS:
            raise MalformedRecordError(
                f"Expected {RECORD_FIELDS} fields, got {len(parts)}: {data!r}"
            )

        name, health, damage, alive = parts
        health = health.strip()
        damage = damage.strip()

        if not _INT_RE.fullmatch(health):
            raise MalformedRecordError(f"Health is not an integer: {health!r}")
        if not _INT_RE.fullmatch(damage):
            raise MalformedRecordError(f"Damage is not an integer: {damage!r}")

        alive_key = alive.strip().lower()
        if alive_key not in _BOOL_VALUES:
            raise MalformedRecordError(f"Alive is not a boolean: {alive!r}")

        health_value = int(health)
        damage_value = int(damage)
        alive_value = _BOOL_VALUES[alive_key]

        if damage_value <= 0:
            raise MalformedRecordError(f"Damage must be positive: {damage_value}")
        if alive_value != (health_value > 0):
            raise MalformedRecordError(
                f"Alive={alive_value} contradicts health {health_value}: {data!r}"
            )

        return cls(
            name=name,
            health=health_value,
            damage=damage_value,
            alive=alive_value,
        )
