"""
Testy dla pętli bitwy.

Testuje:
- Determinizm i liczbę rund
- Kolejność ataków i targeting "pierwszy żywy"
- Regułę wyniku (także obie drużyny martwe)
- Log bitwy
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from autochess.simulation.battle import Battle, BattlePhase, resolve_outcome
from autochess.simulation.state import BattleState
from autochess.events.event_logger import EventLogger, EventType
from autochess.units.roster import Roster
from autochess.units.unit import Unit


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def logger():
    return EventLogger()


def create_state(player, enemy):
    """Helper: stan z gotowymi drużynami."""
    return BattleState(player_units=Roster(player), enemy_units=Roster(enemy))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: DETERMINIZM
# ═══════════════════════════════════════════════════════════════════════════

def test_one_on_one_player_wins_in_two_rounds(logger):
    hero = Unit("Hero", health=30, damage=10)
    orc = Unit("Orc", health=20, damage=5)
    battle = Battle(create_state([hero], [orc]), logger)

    result = battle.run()

    assert result["winner"] == "player"
    assert result["rounds"] == 2
    assert battle.phase is BattlePhase.PLAYER_WON
    assert hero.health == 25
    assert orc.health == 0
    assert orc.is_dead()


def test_round_by_round(logger):
    hero = Unit("Hero", health=30, damage=10)
    orc = Unit("Orc", health=20, damage=5)
    battle = Battle(create_state([hero], [orc]), logger)

    battle.run_round()
    assert (hero.health, orc.health) == (25, 10)
    assert battle.is_contested()

    battle.run_round()
    assert (hero.health, orc.health) == (25, 0)
    assert not battle.is_contested()


def test_same_setup_same_log():
    def play():
        logger = EventLogger()
        state = create_state(
            [Unit("A", health=50, damage=12), Unit.dragon("D", health=70, damage=9)],
            [Unit("X", health=60, damage=11), Unit("Y", health=40, damage=14)],
        )
        Battle(state, logger).run()
        return logger.get_lines()

    assert play() == play()


def test_enemy_wins_when_stronger(logger):
    hero = Unit("Hero", health=10, damage=1)
    orc = Unit("Orc", health=100, damage=10)
    result = Battle(create_state([hero], [orc]), logger).run()

    assert result["winner"] == "enemy"
    assert result["rounds"] == 1
    assert result["survivors"] == [
        {"name": "Orc", "health": 99, "damage": 10, "kind": "unit", "alive": True, "team": "enemy"}
    ]


def test_player_strikes_first_in_equal_duel(logger):
    """Gracz atakuje pierwszy, więc wróg ginie zanim odpowie."""
    hero = Unit("Hero", health=10, damage=10)
    orc = Unit("Orc", health=10, damage=10)

    result = Battle(create_state([hero], [orc]), logger).run()

    assert result["winner"] == "player"
    assert hero.health == 10
    assert len(logger.get_events_by_type(EventType.UNIT_ATTACK)) == 1


# ═══════════════════════════════════════════════════════════════════════════
# TEST: KOLEJNOŚĆ I TARGETING
# ═══════════════════════════════════════════════════════════════════════════

def test_everyone_targets_first_alive(logger):
    a = Unit("A", health=100, damage=5)
    b = Unit("B", health=100, damage=7)
    x = Unit("X", health=100, damage=3)
    y = Unit("Y", health=100, damage=4)

    battle = Battle(create_state([a, b], [x, y]), logger)
    battle.run_round()

    assert x.health == 100 - 5 - 7
    assert y.health == 100
    assert a.health == 100 - 3 - 4
    assert b.health == 100


def test_target_re_resolved_after_kill(logger):
    """Wróg zabity w tej fazie nie jest celem następnego ataku."""
    a = Unit("A", health=100, damage=10)
    b = Unit("B", health=100, damage=10)
    x = Unit("X", health=10, damage=1)
    y = Unit("Y", health=100, damage=1)

    Battle(create_state([a, b], [x, y]), logger).run_round()

    assert x.is_dead()
    assert y.health == 90
    attacks = logger.get_events_by_type(EventType.UNIT_ATTACK)
    assert [(e.unit_id, e.target_id) for e in attacks[:2]] == [("A", "X"), ("B", "Y")]


def test_enemy_killed_in_player_phase_does_not_attack(logger):
    a = Unit("A", health=100, damage=50)
    x = Unit("X", health=50, damage=99)
    y = Unit("Y", health=500, damage=1)

    Battle(create_state([a], [x, y]), logger).run_round()

    assert a.health == 99
    attackers = [e.unit_id for e in logger.get_events_by_type(EventType.UNIT_ATTACK)]
    assert attackers == ["A", "Y"]


def test_attack_order_is_roster_order(logger):
    units = [Unit(f"P{i}", health=100, damage=1) for i in range(3)]
    enemy = Unit("E", health=100, damage=1)
    Battle(create_state(units, [enemy]), logger).run_round()

    attackers = [e.unit_id for e in logger.get_events_by_type(EventType.UNIT_ATTACK)]
    assert attackers == ["P0", "P1", "P2", "E"]


def test_dead_units_from_start_do_not_fight(logger):
    ghost = Unit("Ghost", health=0, damage=100)
    hero = Unit("Hero", health=30, damage=10)
    orc = Unit("Orc", health=20, damage=5)

    Battle(create_state([ghost, hero], [orc]), logger).run()

    assert all(e.unit_id != "Ghost" for e in logger.get_events_by_type(EventType.UNIT_ATTACK))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: WYNIK
# ═══════════════════════════════════════════════════════════════════════════

def test_resolve_outcome_double_knockout_is_loss():
    hero = Unit("Hero", health=10, damage=10)
    orc = Unit("Orc", health=10, damage=10)
    hero.take_damage(10)
    orc.take_damage(10)

    assert resolve_outcome(create_state([hero], [orc])) is BattlePhase.ENEMY_WON


def test_resolve_outcome_player_alive_wins():
    hero = Unit("Hero", health=10, damage=10)
    orc = Unit("Orc", health=10, damage=10)
    assert resolve_outcome(create_state([hero], [orc])) is BattlePhase.PLAYER_WON


def test_empty_rosters_is_loss(logger):
    battle = Battle(create_state([], []), logger)
    result = battle.run()
    assert result["winner"] == "enemy"
    assert result["rounds"] == 0


def test_empty_enemy_roster_is_instant_win(logger):
    result = Battle(create_state([Unit("Hero", health=1, damage=1)], []), logger).run()
    assert result == {
        "winner": "player",
        "phase": "PLAYER_WON",
        "rounds": 0,
        "survivors": [
            {"name": "Hero", "health": 1, "damage": 1, "kind": "unit", "alive": True, "team": "player"}
        ],
    }


def test_run_twice_returns_same_result(logger):
    battle = Battle(create_state([Unit("Hero", health=30, damage=10)], [Unit("Orc", health=20, damage=5)]), logger)
    first = battle.run()
    count = logger.get_event_count()

    assert battle.run() == first
    assert logger.get_event_count() == count


def test_result_before_run():
    battle = Battle(create_state([], []))
    assert battle.get_result()["winner"] is None
    assert battle.phase is BattlePhase.IN_PROGRESS


# ═══════════════════════════════════════════════════════════════════════════
# TEST: LOG
# ═══════════════════════════════════════════════════════════════════════════

def test_battle_log_sequence(logger):
    hero = Unit("Hero", health=30, damage=10)
    orc = Unit("Orc", health=20, damage=5)
    Battle(create_state([hero], [orc]), logger).run()

    assert logger.get_lines() == [
        "The battle has begun!",
        "Hero attacks Orc for 10 damage!",
        "Orc attacks Hero for 5 damage!",
        "Hero attacks Orc for 10 damage!",
        "Orc has been defeated.",
        "You won!",
    ]
    assert len(logger.get_events_by_type(EventType.ROUND_START)) == 2
    assert len(logger.get_events_in_round(2)) == 4


def test_battle_log_states(logger):
    hero = Unit("Hero", health=30, damage=10)
    orc = Unit("Orc", health=20, damage=5)
    Battle(create_state([hero], [orc]), logger).run()

    assert [u["name"] for u in logger.initial_state["player"]] == ["Hero"]
    assert logger.initial_state["enemy"][0]["health"] == 20
    assert logger.final_state["winner"] == "player"
    assert logger.final_state["rounds"] == 2


def test_save_log(tmp_path, logger):
    battle = Battle(create_state([Unit("Hero", health=30, damage=10)], [Unit("Orc", health=20, damage=5)]), logger)
    battle.run()

    path = tmp_path / "logs" / "battle.json"
    battle.save_log(str(path))

    assert path.exists()
    assert battle.get_log()["final_state"]["winner"] == "player"
