"""
Pętla bitwy - automatyczna wymiana ataków aż jedna drużyna wyginie.

Bitwa jest w pełni deterministyczna: brak losowości, stała kolejność
ataków i stały targeting.

PĘTLA RUNDY:
═══════════════════════════════════════════════════════════════════

    1. PLAYER_ATTACKS
       ─────────────────────────────────────────────────────────
       • Lista atakujących = żywe jednostki gracza na początku fazy
         (kolejność drużyny)
       • Każdy atakuje PIERWSZEGO żywego wroga - cel wyznaczany
         od nowa przed każdym atakiem, więc wróg zabity w tej fazie
         nie jest już celem kolejnych ataków

    2. ENEMY_ATTACKS
       ─────────────────────────────────────────────────────────
       • Symetrycznie: żywi wrogowie na początku fazy atakują
         pierwszą żywą jednostkę gracza

    3. CHECK_END_CONDITION
       ─────────────────────────────────────────────────────────
       • Pętla trwa dopóki OBIE drużyny mają żywą jednostkę
       • Sprawdzane dopiero po pełnej rundzie

STANY:
═══════════════════════════════════════════════════════════════════

    IN_PROGRESS ──► PLAYER_WON   (gracz ma >= 1 żywą jednostkę)
                └─► ENEMY_WON    (każdy inny wynik, także
                                  obie drużyny martwe)

Przykład użycia:
    >>> state = BattleState()
    >>> state.player_units.add(Unit("Hero", health=30, damage=10))
    >>> state.enemy_units.add(Unit("Orc", health=20, damage=5))
    >>> result = Battle(state).run()
    >>> result["winner"], result["rounds"]
    ('player', 2)
"""

from __future__ import annotations
from enum import Enum, auto
from typing import List, Dict, Any, Optional

from ..units.roster import Roster
from ..events.event_logger import EventLogger
from .state import BattleState


class BattlePhase(Enum):
    """Stan bitwy."""

    IN_PROGRESS = auto()
    PLAYER_WON = auto()
    ENEMY_WON = auto()

    def is_terminal(self) -> bool:
        return self is not BattlePhase.IN_PROGRESS


WINNER_NAMES = {
    BattlePhase.PLAYER_WON: "player",
    BattlePhase.ENEMY_WON: "enemy",
}


def resolve_outcome(state: BattleState) -> BattlePhase:
    """
    Wyznacza wynik zakończonej bitwy.

    Gracz wygrywa wtedy i tylko wtedy, gdy ma choć jedną żywą jednostkę.
    Obie drużyny martwe (lub puste) = przegrana gracza.
    """
    if state.player_units.has_alive():
        return BattlePhase.PLAYER_WON
    return BattlePhase.ENEMY_WON


class Battle:
    """
    Silnik bitwy.

    Attributes:
        state (BattleState): Stan gry z obiema drużynami
        logger (EventLogger): Logger zdarzeń
        round (int): Numer ostatniej rozegranej rundy
        phase (BattlePhase): Stan bitwy

    Example:
        >>> battle = Battle(state, logger)
        >>> result = battle.run()
        >>> battle.phase
        <BattlePhase.PLAYER_WON: 2>
    """

    def __init__(self, state: BattleState, logger: Optional[EventLogger] = None):
        """
        Inicjalizuje bitwę.

        Args:
            state: Stan gry (drużyny są modyfikowane w trakcie walki)
            logger: Logger zdarzeń (nowy jeśli None)
        """
        self.state = state
        self.logger = logger or EventLogger()
        self.round = 0
        self.phase = BattlePhase.IN_PROGRESS

    # ─────────────────────────────────────────────────────────────────────────
    # GŁÓWNA PĘTLA
    # ─────────────────────────────────────────────────────────────────────────

    def run(self) -> Dict[str, Any]:
        """
        Rozgrywa bitwę do końca.

        Ponowne wywołanie po zakończeniu zwraca ten sam wynik.

        Returns:
            Dict: Wynik bitwy
                - winner: "player" / "enemy"
                - rounds: int
                - survivors: List[Dict]
        """
        if self.phase.is_terminal():
            return self.get_result()

        self._log_start()

        while self.is_contested():
            self.run_round()

        self.phase = resolve_outcome(self.state)
        self._log_end()

        return self.get_result()

    def is_contested(self) -> bool:
        """Czy obie drużyny mają jeszcze żywą jednostkę."""
        return self.state.player_units.has_alive() and self.state.enemy_units.has_alive()

    def run_round(self) -> None:
        """Rozgrywa jedną rundę: najpierw atakuje gracz, potem wróg."""
        self.round += 1
        self.logger.round = self.round
        self.logger.log_round_start()

        self._phase_attacks(self.state.player_units, self.state.enemy_units)
        self._phase_attacks(self.state.enemy_units, self.state.player_units)

    # ─────────────────────────────────────────────────────────────────────────
    # FAZY RUNDY
    # ─────────────────────────────────────────────────────────────────────────

    def _phase_attacks(self, attackers: Roster, defenders: Roster) -> None:
        """Każdy żywy atakujący (snapshot) bije pierwszego żywego obrońcę."""
        for attacker in attackers.alive_units():
            target = defenders.first_alive()
            if target is None:
                break
            attacker.attack(target, self.logger)

    # ─────────────────────────────────────────────────────────────────────────
    # WYNIK I LOGI
    # ─────────────────────────────────────────────────────────────────────────

    def _survivors(self) -> List[Dict[str, Any]]:
        survivors = []
        for team, roster in (("player", self.state.player_units), ("enemy", self.state.enemy_units)):
            for unit in roster.alive_units():
                snapshot = unit.snapshot()
                snapshot["team"] = team
                survivors.append(snapshot)
        return survivors

    def _log_start(self) -> None:
        self.logger.round = 0
        self.logger.log_battle_start(
            self.state.player_units.snapshot(),
            self.state.enemy_units.snapshot(),
        )

    def _log_end(self) -> None:
        self.logger.log_battle_end(
            WINNER_NAMES[self.phase],
            self.round,
            self._survivors(),
        )

    def get_result(self) -> Dict[str, Any]:
        """
        Zwraca wynik bitwy.

        Returns:
            Dict:
                - winner: "player" / "enemy" / None (bitwa trwa)
                - phase: nazwa BattlePhase
                - rounds: liczba rozegranych rund
                - survivors: snapshoty żywych jednostek z kluczem "team"
        """
        return {
            "winner": WINNER_NAMES.get(self.phase),
            "phase": self.phase.name,
            "rounds": self.round,
            "survivors": self._survivors(),
        }

    def save_log(self, filepath: str) -> None:
        """Zapisuje log do pliku JSON."""
        self.logger.save(filepath)

    def get_log(self) -> Dict[str, Any]:
        """Zwraca log jako słownik."""
        return self.logger.to_dict()
