"""
Rekrutacja - wybór drużyny gracza z puli za pieniądze.

Gracz podaje linie tekstu: listę numerów z puli (od 1, rozdzielone
przecinkami) albo komendę startu. Każda linia jest przetwarzana
token po tokenie - błędny token nie przerywa reszty linii.

STANY:
═══════════════════════════════════════════════════════════════════

    SELECTING (Wybór)
    ─────────────────────────────────────────────────────────────
    Gracz wybiera jednostki.

    Wejście: start rekrutacji
    Wyjście:
        -> READY (komenda startu i >= 1 żywa jednostka w drużynie)
        -> SELECTING (komenda startu przy pustej drużynie - ponowny prompt)

    READY (Gotowe)
    ─────────────────────────────────────────────────────────────
    Stan końcowy - można zaczynać bitwę.

OBSŁUGA TOKENU:
═══════════════════════════════════════════════════════════════════

    "abc", "0", "9"        -> SELECTION_INVALID, dalej kolejne tokeny
    jednostka już w drużynie -> RECRUIT_DUPLICATE, bez zmian
    brak pieniędzy         -> RECRUIT_REJECTED, bez zmian
    w pozostałych przypadkach -> opłata pobrana, jednostka dodana

    Pieniądze są pobierane PRZED dodaniem jednostki - nieudana opłata
    nie zostawia darmowej jednostki w drużynie.

Przykład użycia:
    >>> flow = RecruitmentFlow(state, pool, logger)
    >>> flow.submit("1, 4")
    <RecruitmentPhase.SELECTING: 1>
    >>> flow.submit("START")
    <RecruitmentPhase.READY: 2>
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Callable, List, Optional, Sequence
import re

from ..units.unit import Unit
from ..events.event_logger import EventLogger
from ..simulation.state import BattleState, InsufficientFundsError

HERO_COST = 50
START_COMMAND = "start"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class InvalidSelectionError(ValueError):
    """Token wyboru nie jest poprawnym numerem z puli."""

    def __init__(self, token: str, pool_size: int):
        super().__init__(f"Invalid choice {token!r}: expected a number from 1 to {pool_size}")
        self.token = token
        self.pool_size = pool_size


class RecruitmentPhase(Enum):
    """Stan rekrutacji."""

    SELECTING = auto()
    READY = auto()


def parse_selection_token(token: str, pool_size: int) -> int:
    """
    Zamienia token (numer od 1) na indeks w puli (od 0).

    Args:
        token: Pojedynczy token z linii wejścia
        pool_size: Rozmiar puli

    Returns:
        int: Indeks 0-based

    Raises:
        InvalidSelectionError: Nie liczba lub poza zakresem 1..pool_size
    """
    stripped = token.strip()
    if not _INDEX_RE.fullmatch(stripped):
        raise InvalidSelectionError(token, pool_size)

    number = int(stripped)
    if not 1 <= number <= pool_size:
        raise InvalidSelectionError(token, pool_size)

    return number - 1


def format_pool_menu(pool: Sequence[Unit], money: int, cost: int = HERO_COST) -> List[str]:
    """
    Zwraca linie menu puli rekrutacji.

    Example:
        >>> format_pool_menu(pool, 250)[0]
        '1. Warrior 1 (Health: 100, Damage: 20)'
    """
    lines = [
        f"{i}. {unit.name} (Health: {unit.health}, Damage: {unit.damage})"
        for i, unit in enumerate(pool, start=1)
    ]
    lines.append(f"You have {money} coins. Each hero costs {cost} coins.")
    return lines


class RecruitmentFlow:
    """
    Maszyna stanów rekrutacji.

    Attributes:
        state (BattleState): Stan gry (drużyna gracza + pieniądze)
        pool (Tuple[Unit]): Pula kandydatów w stałej kolejności
        logger (EventLogger): Logger zdarzeń
        hero_cost (int): Koszt jednej jednostki
        start_command (str): Komenda kończąca wybór (bez względu na wielkość liter)
        phase (RecruitmentPhase): Aktualny stan
    """

    def __init__(
        self,
        state: BattleState,
        pool: Sequence[Unit],
        logger: Optional[EventLogger] = None,
        hero_cost: int = HERO_COST,
        start_command: str = START_COMMAND,
    ):
        self.state = state
        self.pool = tuple(pool)
        self.logger = logger or EventLogger()
        self.hero_cost = hero_cost
        self.start_command = start_command
        self.phase = RecruitmentPhase.SELECTING

    def is_ready(self) -> bool:
        return self.phase is RecruitmentPhase.READY

    def is_start_command(self, line: str) -> bool:
        return line.strip().casefold() == self.start_command.casefold()

    # ─────────────────────────────────────────────────────────────────────────
    # PRZETWARZANIE WEJŚCIA
    # ─────────────────────────────────────────────────────────────────────────

    def submit(self, line: str) -> RecruitmentPhase:
        """
        Przetwarza jedną linię wejścia.

        Args:
            line: Komenda startu albo numery z puli po przecinku

        Returns:
            RecruitmentPhase: Stan po przetworzeniu linii

        Raises:
            RuntimeError: Rekrutacja już zakończona
        """
        if self.is_ready():
            raise RuntimeError("Recruitment is already finished")

        if self.is_start_command(line):
            self._try_start()
            return self.phase

        for token in line.split(","):
            try:
                index = parse_selection_token(token, len(self.pool))
            except InvalidSelectionError:
                self.logger.log_invalid_selection(token.strip())
                continue
            self.recruit(index)

        return self.phase

    def _try_start(self) -> None:
        if not self.state.player_units.alive_units():
            self.logger.log_start_rejected()
            return

        self.phase = RecruitmentPhase.READY
        self.logger.log_recruitment_done(
            len(self.state.player_units.alive_units()),
            self.state.money,
        )

    def recruit(self, index: int) -> bool:
        """
        Rekrutuje kandydata z puli (indeks 0-based).

        Args:
            index: Indeks w puli

        Returns:
            bool: True jeśli jednostka dołączyła do drużyny
        """
        candidate = self.pool[index]
        number = index + 1

        if self.state.player_units.contains(candidate):
            self.logger.log_already_recruited(candidate.name, number)
            return False

        try:
            self.state.deduct_money(self.hero_cost)
        except InsufficientFundsError as e:
            self.logger.log_recruit_rejected(candidate.name, number, e.amount, e.balance)
            return False

        self.state.player_units.add(candidate)
        self.logger.log_recruited(candidate.name, number, self.state.money)
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # PĘTLA
    # ─────────────────────────────────────────────────────────────────────────

    def menu_lines(self) -> List[str]:
        """Linie menu dla aktualnego salda."""
        return format_pool_menu(self.pool, self.state.money, self.hero_cost)

    def run(
        self,
        read_line: Callable[[], str],
        on_prompt: Optional[Callable[["RecruitmentFlow"], None]] = None,
    ) -> None:
        """
        Czyta linie aż do stanu READY.

        Args:
            read_line: Zwraca kolejną linię wejścia (blokująco)
            on_prompt: Wywoływane przed każdym odczytem (np. wypisanie menu)

        Raises:
            EOFError / StopIteration: Z read_line - wejście się skończyło
        """
        while not self.is_ready():
            if on_prompt is not None:
                on_prompt(self)
            self.submit(read_line())
