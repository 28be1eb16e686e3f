"""
System logowania zdarzeń gry do formatu JSON.

Każde zdarzenie (rekrutacja, atak, śmierć, wynik bitwy) jest zapisywane
z pełnym kontekstem ORAZ z czytelną linią tekstu. Linie tekstu trafiają
do opcjonalnego "sinka" (np. print w CLI), a pełny log można zapisać
do pliku JSON i przejrzeć po walce.

TYPY ZDARZEŃ:
═══════════════════════════════════════════════════════════════════

    GAME_SETUP
    ─────────────────────────────────────────────────────────────
    Drużyna wroga została utworzona.
    Data: enemy_count

    RECRUIT_ACCEPTED / RECRUIT_DUPLICATE / RECRUIT_REJECTED
    ─────────────────────────────────────────────────────────────
    Wynik próby rekrutacji jednostki z puli.
    Data: index, money_left / cost, money

    SELECTION_INVALID
    ─────────────────────────────────────────────────────────────
    Niepoprawny token wyboru (nie liczba lub poza zakresem).
    Data: token

    START_REJECTED / RECRUITMENT_DONE
    ─────────────────────────────────────────────────────────────
    Komenda startu odrzucona (pusta drużyna) lub przyjęta.

    BATTLE_START / ROUND_START / BATTLE_END
    ─────────────────────────────────────────────────────────────
    Przebieg bitwy.
    Data: winner, rounds, survivors

    UNIT_ATTACK / UNIT_DEATH
    ─────────────────────────────────────────────────────────────
    Atak jednostki i jej śmierć.
    Data: damage, kind, health_after

FORMAT LOGU:
═══════════════════════════════════════════════════════════════════

{
    "metadata": {
        "version": "1.0",
        "starting_money": 250,
        "hero_cost": 50,
        "timestamp": "2024-01-01T12:00:00"
    },
    "initial_state": {"player": [...], "enemy": [...]},
    "events": [
        {
            "round": 1,
            "type": "UNIT_ATTACK",
            "unit_id": "Warrior 1",
            "target_id": "Enemy 1",
            "message": "Warrior 1 attacks Enemy 1 for 20 damage!",
            "data": {"damage": 20, "kind": "unit"}
        },
        ...
    ],
    "final_state": {
        "winner": "player",
        "rounds": 7,
        "survivors": [...]
    }
}
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional
from datetime import datetime
import json
from pathlib import Path


class EventType(Enum):
    """Typ zdarzenia w grze."""

    # Przygotowanie
    GAME_SETUP = auto()

    # Rekrutacja
    RECRUIT_ACCEPTED = auto()
    RECRUIT_DUPLICATE = auto()
    RECRUIT_REJECTED = auto()
    SELECTION_INVALID = auto()
    START_REJECTED = auto()
    RECRUITMENT_DONE = auto()

    # Bitwa
    BATTLE_START = auto()
    ROUND_START = auto()
    UNIT_ATTACK = auto()
    UNIT_DEATH = auto()
    BATTLE_END = auto()


@dataclass
class GameEvent:
    """
    Pojedyncze zdarzenie w grze.

    Attributes:
        round (int): Numer rundy (0 = przed bitwą)
        event_type (EventType): Typ zdarzenia
        message (str): Linia tekstu dla gracza
        unit_id (Optional[str]): Jednostka, której dotyczy zdarzenie
        target_id (Optional[str]): Cel (jeśli dotyczy)
        data (Dict): Dodatkowe dane specyficzne dla typu zdarzenia
    """
    round: int
    event_type: EventType
    message: str = ""
    unit_id: Optional[str] = None
    target_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serializuje zdarzenie do słownika."""
        result = {
            "round": self.round,
            "type": self.event_type.name,
            "message": self.message,
        }

        if self.unit_id:
            result["unit_id"] = self.unit_id
        if self.target_id:
            result["target_id"] = self.target_id
        if self.data:
            result["data"] = self.data

        return result


class EventLogger:
    """
    Logger zdarzeń gry.

    Zbiera wszystkie zdarzenia w kolejności wystąpienia. Każda linia
    tekstu jest dodatkowo przekazywana do `sink` (jeśli podany).

    Attributes:
        events (List[GameEvent]): Lista wszystkich zdarzeń
        round (int): Aktualna runda - ustawiana przez pętlę bitwy
        sink (Optional[Callable]): Odbiorca linii tekstu
        metadata (Dict): Metadane gry
        initial_state (Dict): Składy drużyn na starcie bitwy
        final_state (Dict): Wynik bitwy

    Example:
        >>> logger = EventLogger(sink=print)
        >>> logger.log_invalid_selection("abc")
        Invalid choice: abc. Please try again.
        >>> logger.save("output/battle.json")
    """

    def __init__(
        self,
        sink: Optional[Callable[[str], None]] = None,
        starting_money: int = 250,
        hero_cost: int = 50,
    ):
        """
        Inicjalizuje logger.

        Args:
            sink: Funkcja przyjmująca każdą linię tekstu (np. print)
            starting_money: Budżet startowy gracza (metadane)
            hero_cost: Koszt rekrutacji (metadane)
        """
        self.events: List[GameEvent] = []
        self.round = 0
        self.sink = sink
        self.metadata: Dict[str, Any] = {
            "version": "1.0",
            "starting_money": starting_money,
            "hero_cost": hero_cost,
            "timestamp": datetime.now().isoformat(),
        }
        self.initial_state: Dict[str, Any] = {}
        self.final_state: Dict[str, Any] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # LOGOWANIE OGÓLNE
    # ─────────────────────────────────────────────────────────────────────────

    def log(self, event: GameEvent) -> None:
        """
        Dodaje zdarzenie do logu i przekazuje jego linię do sinka.

        Args:
            event: Zdarzenie do zalogowania
        """
        self.events.append(event)
        if self.sink is not None and event.message:
            self.sink(event.message)

    def log_event(
        self,
        event_type: EventType,
        message: str,
        unit_id: Optional[str] = None,
        target_id: Optional[str] = None,
        **data: Any,
    ) -> GameEvent:
        """
        Tworzy i loguje zdarzenie w aktualnej rundzie.

        Args:
            event_type: Typ zdarzenia
            message: Linia tekstu
            unit_id: Jednostka
            target_id: Cel
            **data: Dodatkowe dane

        Returns:
            GameEvent: Utworzone zdarzenie
        """
        event = GameEvent(
            round=self.round,
            event_type=event_type,
            message=message,
            unit_id=unit_id,
            target_id=target_id,
            data=dict(data),
        )
        self.log(event)
        return event

    # ─────────────────────────────────────────────────────────────────────────
    # REKRUTACJA
    # ─────────────────────────────────────────────────────────────────────────

    def log_game_setup(self, enemy_count: int) -> None:
        """Loguje utworzenie drużyny wroga."""
        self.log_event(
            EventType.GAME_SETUP,
            "Enemy team assembled.",
            enemy_count=enemy_count,
        )

    def log_recruited(self, name: str, index: int, money_left: int) -> None:
        """Loguje przyjęcie jednostki do drużyny."""
        self.log_event(
            EventType.RECRUIT_ACCEPTED,
            f"{name} joined your team. You have {money_left} coins left.",
            unit_id=name,
            index=index,
            money_left=money_left,
        )

    def log_already_recruited(self, name: str, index: int) -> None:
        """Loguje ponowny wybór jednostki, która już jest w drużynie."""
        self.log_event(
            EventType.RECRUIT_DUPLICATE,
            f"{name} is already in your team.",
            unit_id=name,
            index=index,
        )

    def log_recruit_rejected(self, name: str, index: int, cost: int, money: int) -> None:
        """Loguje odrzucenie rekrutacji z braku pieniędzy."""
        self.log_event(
            EventType.RECRUIT_REJECTED,
            f"Not enough money to recruit {name}: costs {cost}, you have {money}.",
            unit_id=name,
            index=index,
            cost=cost,
            money=money,
        )

    def log_invalid_selection(self, token: str) -> None:
        """Loguje niepoprawny token wyboru."""
        self.log_event(
            EventType.SELECTION_INVALID,
            f"Invalid choice: {token}. Please try again.",
            token=token,
        )

    def log_start_rejected(self) -> None:
        """Loguje próbę startu z pustą drużyną."""
        self.log_event(
            EventType.START_REJECTED,
            "You must recruit at least one hero before the battle starts.",
        )

    def log_recruitment_done(self, team_size: int, money_left: int) -> None:
        """Loguje zakończenie rekrutacji."""
        self.log_event(
            EventType.RECRUITMENT_DONE,
            f"Team ready: {team_size} hero(es), {money_left} coins left.",
            team_size=team_size,
            money_left=money_left,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # BITWA
    # ─────────────────────────────────────────────────────────────────────────

    def log_battle_start(self, player: List[Dict], enemy: List[Dict]) -> None:
        """Loguje start bitwy i zapamiętuje składy drużyn."""
        self.initial_state = {"player": player, "enemy": enemy}
        self.log_event(
            EventType.BATTLE_START,
            "The battle has begun!",
            player=[u["name"] for u in player],
            enemy=[u["name"] for u in enemy],
        )

    def log_round_start(self) -> None:
        """Loguje początek rundy (bez linii tekstu)."""
        self.events.append(GameEvent(round=self.round, event_type=EventType.ROUND_START))

    def log_attack(
        self,
        message: str,
        unit_id: str,
        target_id: str,
        damage: int,
        kind: str,
        health_after: int,
    ) -> None:
        """Loguje atak."""
        self.log_event(
            EventType.UNIT_ATTACK,
            message,
            unit_id=unit_id,
            target_id=target_id,
            damage=damage,
            kind=kind,
            health_after=health_after,
        )

    def log_death(self, unit_id: str, health: int) -> None:
        """Loguje śmierć jednostki."""
        self.log_event(
            EventType.UNIT_DEATH,
            f"{unit_id} has been defeated.",
            unit_id=unit_id,
            health=health,
        )

    def log_battle_end(
        self,
        winner: str,
        rounds: int,
        survivors: List[Dict],
    ) -> None:
        """Loguje koniec bitwy."""
        self.final_state = {
            "winner": winner,
            "rounds": rounds,
            "survivors": survivors,
        }
        message = "You won!" if winner == "player" else "You lost."
        self.log_event(
            EventType.BATTLE_END,
            message,
            winner=winner,
            rounds=rounds,
            survivors=[s["name"] for s in survivors],
        )

    # ─────────────────────────────────────────────────────────────────────────
    # SERIALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializuje cały log do słownika.

        Returns:
            Dict: Pełny log w formacie dla JSON
        """
        return {
            "metadata": self.metadata,
            "initial_state": self.initial_state,
            "events": [e.to_dict() for e in self.events],
            "final_state": self.final_state,
        }

    def save(self, filepath: str) -> None:
        """
        Zapisuje log do pliku JSON.

        Args:
            filepath: Ścieżka do pliku
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Zwraca log jako string JSON.

        Args:
            indent: Wcięcie (None = compact)

        Returns:
            str: JSON string
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    # ─────────────────────────────────────────────────────────────────────────
    # STATYSTYKI
    # ─────────────────────────────────────────────────────────────────────────

    def get_event_count(self) -> int:
        """Zwraca liczbę zdarzeń."""
        return len(self.events)

    def get_events(self) -> List[Dict[str, Any]]:
        """Zwraca wszystkie zdarzenia jako słowniki."""
        return [e.to_dict() for e in self.events]

    def get_events_by_type(self, event_type: EventType) -> List[GameEvent]:
        """Filtruje zdarzenia po typie."""
        return [e for e in self.events if e.event_type == event_type]

    def get_events_for_unit(self, unit_id: str) -> List[GameEvent]:
        """Filtruje zdarzenia dla jednostki."""
        return [e for e in self.events if e.unit_id == unit_id]

    def get_events_in_round(self, round_no: int) -> List[GameEvent]:
        """Filtruje zdarzenia w rundzie."""
        return [e for e in self.events if e.round == round_no]

    def get_lines(self) -> List[str]:
        """Zwraca wszystkie linie tekstu w kolejności."""
        return [e.message for e in self.events if e.message]
