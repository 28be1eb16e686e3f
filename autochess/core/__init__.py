"""
Core module - konfiguracja gry.

Zawiera:
- ConfigLoader: Wczytywanie konfiguracji YAML z defaults
- GameConfig: Ustawienia ekonomii i komendy startu
"""

from .config_loader import ConfigLoader, GameConfig, DEFAULT_DATA_PATH

__all__ = ["ConfigLoader", "GameConfig", "DEFAULT_DATA_PATH"]
