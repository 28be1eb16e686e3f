"""
Game - składa całą grę: konfigurację, stan, pulę, rekrutację i bitwę.

Kolejność rozgrywki:
    1. Game.from_loader() - wczytanie YAML, utworzenie drużyny wroga
    2. game.recruitment()  - wybór drużyny gracza
    3. game.battle()       - automatyczna walka

Użycie:
    >>> game = Game.from_loader(ConfigLoader("autochess/data/"), sink=print)
    Enemy team assembled.
    >>> result = game.play(iter(["1,4", "start"]).__next__)
    >>> result["winner"]
    'player'
"""

from __future__ import annotations
from typing import Callable, Dict, Any, List, Optional, Sequence

from .core.config_loader import ConfigLoader, GameConfig
from .events.event_logger import EventLogger
from .recruitment.recruitment import RecruitmentFlow
from .simulation.battle import Battle
from .simulation.state import BattleState
from .units.roster import Roster
from .units.unit import Unit


class Game:
    """
    Pojedyncza rozgrywka.

    Attributes:
        config (GameConfig): Ustawienia ekonomii
        state (BattleState): Drużyny i pieniądze
        pool (List[Unit]): Pula rekrutacji
        logger (EventLogger): Wspólny logger rekrutacji i bitwy
    """

    def __init__(
        self,
        config: GameConfig,
        pool: Sequence[Unit],
        enemy_team: Sequence[Unit],
        sink: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        self.pool: List[Unit] = list(pool)
        self.state = BattleState(
            money=config.starting_money,
            enemy_units=Roster(enemy_team),
        )
        self.logger = EventLogger(
            sink=sink,
            starting_money=config.starting_money,
            hero_cost=config.hero_cost,
        )
        self.logger.log_game_setup(len(self.state.enemy_units))
        self._recruitment: Optional[RecruitmentFlow] = None
        self._battle: Optional[Battle] = None

    @classmethod
    def from_loader(
        cls,
        loader: ConfigLoader,
        sink: Optional[Callable[[str], None]] = None,
    ) -> "Game":
        """Tworzy grę z plików YAML (świeże instancje jednostek)."""
        return cls(
            config=loader.get_game_config(),
            pool=loader.load_recruitment_pool(),
            enemy_team=loader.load_enemy_team(),
            sink=sink,
        )

    def recruitment(self) -> RecruitmentFlow:
        """Zwraca (tworzy przy pierwszym wywołaniu) rekrutację tej gry."""
        if self._recruitment is None:
            self._recruitment = RecruitmentFlow(
                self.state,
                self.pool,
                self.logger,
                hero_cost=self.config.hero_cost,
                start_command=self.config.start_command,
            )
        return self._recruitment

    def battle(self) -> Battle:
        """
        Zwraca bitwę tej gry.

        Raises:
            RuntimeError: Rekrutacja nie jest zakończona
        """
        if not self.recruitment().is_ready():
            raise RuntimeError("Cannot start the battle before recruitment is finished")
        if self._battle is None:
            self._battle = Battle(self.state, self.logger)
        return self._battle

    def play(
        self,
        read_line: Callable[[], str],
        on_prompt: Optional[Callable[[RecruitmentFlow], None]] = None,
    ) -> Dict[str, Any]:
        """
        Rozgrywa całą grę: rekrutacja, potem bitwa.

        Args:
            read_line: Źródło linii wejścia
            on_prompt: Wywoływane przed każdym odczytem linii

        Returns:
            Dict: Wynik bitwy (Battle.get_result)
        """
        self.recruitment().run(read_line, on_prompt)
        return self.battle().run()
