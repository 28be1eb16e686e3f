"""
Testy dla CLI (main.py) z podmienionym input().
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main


def feed_input(monkeypatch, lines):
    """Podmienia input() na kolejne linie; po ich końcu rzuca EOFError."""
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_cli_full_game(monkeypatch, capsys, tmp_path):
    feed_input(monkeypatch, ["start", "4,5", "start"])
    log_path = tmp_path / "battle.json"

    code = main.main(["--save-log", str(log_path), "--verbose"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Enemy team assembled." in out
    assert "1. Warrior 1 (Health: 100, Damage: 20)" in out
    assert "You must recruit at least one hero before the battle starts." in out
    assert "Dragon 1 shoots a fireball at Enemy 1 for 30 damage!" in out
    assert "You lost." in out
    assert "UNIT_ATTACK" in out

    # Cały output konsoli po angielsku, jak linie gry
    assert "RESULTS" in out
    assert "Winner: enemy" in out
    assert "Survivors:" in out
    assert f"Log saved: {log_path}" in out
    assert "EVENT STATISTICS" in out
    assert "WYNIKI" not in out

    saved = json.loads(log_path.read_text(encoding="utf-8"))
    assert saved["final_state"]["winner"] == "enemy"


def test_cli_end_of_input(monkeypatch, capsys):
    feed_input(monkeypatch, ["1"])

    code = main.main([])

    assert code == 1
    assert "the battle did not start" in capsys.readouterr().out
