"""
Testy dla loggera zdarzeń.

Testuje:
- Przekazywanie linii do sinka
- Serializację (dict / JSON / plik)
- Filtry zdarzeń
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from autochess.events.event_logger import EventLogger, EventType, GameEvent


def test_sink_receives_lines():
    lines = []
    logger = EventLogger(sink=lines.append)

    logger.log_invalid_selection("abc")
    logger.log_start_rejected()

    assert lines == [
        "Invalid choice: abc. Please try again.",
        "You must recruit at least one hero before the battle starts.",
    ]


def test_round_start_is_silent():
    lines = []
    logger = EventLogger(sink=lines.append)
    logger.round = 3
    logger.log_round_start()

    assert lines == []
    assert logger.events[0].round == 3
    assert logger.get_lines() == []


def test_events_use_current_round():
    logger = EventLogger()
    logger.round = 2
    logger.log_death("Orc", -5)

    event = logger.events[0]
    assert event.round == 2
    assert event.event_type is EventType.UNIT_DEATH
    assert event.data == {"health": -5}


def test_event_to_dict_skips_empty_fields():
    event = GameEvent(round=0, event_type=EventType.START_REJECTED, message="nope")
    assert event.to_dict() == {"round": 0, "type": "START_REJECTED", "message": "nope"}


def test_battle_end_messages():
    logger = EventLogger()
    logger.log_battle_end("player", 3, [])
    logger.log_battle_end("enemy", 4, [])
    assert logger.get_lines() == ["You won!", "You lost."]
    assert logger.final_state == {"winner": "enemy", "rounds": 4, "survivors": []}


def test_to_json_roundtrips_through_json_module():
    logger = EventLogger(starting_money=100, hero_cost=25)
    logger.log_recruited("Warrior 1", 1, 75)

    data = json.loads(logger.to_json())

    assert data["metadata"]["starting_money"] == 100
    assert data["metadata"]["hero_cost"] == 25
    assert data["events"][0]["type"] == "RECRUIT_ACCEPTED"
    assert data["events"][0]["data"] == {"index": 1, "money_left": 75}


def test_save_creates_parent_dirs(tmp_path):
    logger = EventLogger()
    logger.log_game_setup(5)
    path = tmp_path / "out" / "game.json"

    logger.save(str(path))

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["events"][0]["message"] == "Enemy team assembled."


def test_filters():
    logger = EventLogger()
    logger.log_recruited("Warrior 1", 1, 200)
    logger.log_already_recruited("Warrior 1", 1)
    logger.log_recruited("Dragon 1", 4, 150)

    assert logger.get_event_count() == 3
    assert len(logger.get_events_by_type(EventType.RECRUIT_ACCEPTED)) == 2
    assert len(logger.get_events_for_unit("Warrior 1")) == 2
    assert len(logger.get_events_in_round(0)) == 3
    assert logger.get_events()[2]["unit_id"] == "Dragon 1"
