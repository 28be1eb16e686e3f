#!/usr/bin/env python3
"""
Console Auto-Battler - Entry Point
═══════════════════════════════════════════════════════════════════════════

Rekrutacja drużyny w konsoli, a potem automatyczna bitwa z drużyną wroga.

Użycie:
    python main.py                         # Domyślne dane z autochess/data/
    python main.py --data my_data/         # Inny folder z YAML
    python main.py --save-log out.json     # Zapis pełnego logu
    python main.py --verbose               # Statystyki zdarzeń

Wynik:
    - Wypisuje przebieg rekrutacji i walki na konsolę
    - Opcjonalnie zapisuje pełny log do pliku JSON
"""

import argparse
import sys
from pathlib import Path

# Dodaj katalog projektu do path
sys.path.insert(0, str(Path(__file__).parent))

from autochess.core.config_loader import ConfigLoader, DEFAULT_DATA_PATH
from autochess.events.event_logger import EventType
from autochess.game import Game
from autochess.recruitment.recruitment import RecruitmentFlow


def show_menu(flow: RecruitmentFlow) -> None:
    """Wypisuje pulę i saldo przed każdym odczytem."""
    for line in flow.menu_lines():
        print(line)


def read_choice() -> str:
    return input("Your choice: ")


def main(argv=None):
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="Console Auto-Battler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data",
        default=str(DEFAULT_DATA_PATH),
        help="Folder with YAML files (default: autochess/data/)"
    )
    parser.add_argument(
        "--save-log",
        metavar="PATH",
        help="Save the full event log to a JSON file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print event statistics"
    )

    args = parser.parse_args(argv)

    print("=" * 60)
    print("CONSOLE AUTO-BATTLER")
    print("=" * 60)

    game = Game.from_loader(ConfigLoader(args.data), sink=print)
    flow = game.recruitment()

    print()
    print(
        "Choose heroes for your team (enter hero numbers separated by commas, "
        f"or '{flow.start_command}' to begin the battle):"
    )

    try:
        result = game.play(read_choice, on_prompt=show_menu)
    except (EOFError, KeyboardInterrupt):
        print()
        print("Input closed - the battle did not start.")
        return 1

    print()
    print("=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"Winner: {result['winner']}")
    print(f"Rounds: {result['rounds']}")
    print()

    print("Survivors:")
    for survivor in result["survivors"]:
        print(f"  - {survivor['name']} ({survivor['team']}): {survivor['health']} HP")

    if args.save_log:
        game.logger.save(args.save_log)
        print()
        print(f"Log saved: {args.save_log}")

    if args.verbose:
        print()
        print("-" * 60)
        print("EVENT STATISTICS")
        print("-" * 60)

        for event_type in EventType:
            count = len(game.logger.get_events_by_type(event_type))
            if count > 0:
                print(f"  {event_type.name}: {count}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
