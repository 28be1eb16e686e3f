"""
Loader konfiguracji z automatycznym uzupełnianiem wartości domyślnych.

Gra jest data-driven - statystyki jednostek, pula rekrutacji,
drużyna wroga i ustawienia ekonomii pochodzą z plików YAML:
- defaults.yaml: wartości bazowe jednostek + sekcja `game`
- units.yaml: definicje jednostek, `recruitment_pool`, `enemy_team`

Logika merge (uzupełniania defaults):
    1. Wczytaj defaults.yaml - zawiera wartości bazowe
    2. Wczytaj konkretną definicję (np. jednostka "dragon_1")
    3. Dla każdego klucza w defaults, którego brak w definicji:
       - Użyj wartości z defaults
    4. Definicja może nadpisać defaults

Przykład:
    defaults.yaml:
        unit_defaults:
            kind: unit

    units.yaml:
        units:
            warrior_1:
                name: Warrior 1
                health: 100
                damage: 20
                # kind nie podane -> "unit" z defaults

Użycie:
    >>> loader = ConfigLoader("autochess/data/")
    >>> loader.load_unit("warrior_1")["kind"]
    'unit'
    >>> [u.name for u in loader.load_recruitment_pool()]
    ['Warrior 1', 'Warrior 2', 'Warrior 3', 'Dragon 1', 'Dragon 2']
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
import yaml
import copy

from ..units.unit import Unit

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data"


@dataclass
class GameConfig:
    """
    Ustawienia gry.

    Attributes:
        starting_money (int): Budżet gracza na starcie
        hero_cost (int): Koszt rekrutacji jednej jednostki
        start_command (str): Komenda kończąca rekrutację
    """
    starting_money: int = 250
    hero_cost: int = 50
    start_command: str = "start"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """Tworzy konfigurację z sekcji `game` (brakujące klucze -> domyślne)."""
        defaults = cls()
        return cls(
            starting_money=int(data.get("starting_money", defaults.starting_money)),
            hero_cost=int(data.get("hero_cost", defaults.hero_cost)),
            start_command=str(data.get("start_command", defaults.start_command)),
        )


class ConfigLoader:
    """
    Ładuje konfigurację z plików YAML z automatycznym merge defaults.

    Attributes:
        data_path (Path): Ścieżka do folderu data/
        _defaults (Dict): Cache wczytanych defaults
        _units_file (Dict): Cache wczytanego units.yaml

    Example:
        >>> loader = ConfigLoader("autochess/data/")
        >>> loader.get_game_config().starting_money
        250
    """

    def __init__(self, data_path: Union[str, Path] = DEFAULT_DATA_PATH):
        """
        Inicjalizuje loader ze ścieżką do danych.

        Args:
            data_path: Ścieżka do folderu z plikami YAML
        """
        self.data_path = Path(data_path)
        self._defaults: Optional[Dict] = None
        self._units_file: Optional[Dict] = None

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> Dict:
        """
        Wczytuje plik YAML.

        Args:
            filename: Nazwa pliku (bez ścieżki)

        Returns:
            Dict: Zawartość pliku YAML

        Raises:
            FileNotFoundError: Jeśli plik nie istnieje
        """
        filepath = self.data_path / filename
        with open(filepath, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def get_defaults(self) -> Dict:
        """
        Zwraca słownik z wartościami domyślnymi.

        Cache'uje wczytany plik - kolejne wywołania są szybkie.
        """
        if self._defaults is None:
            self._defaults = self._load_yaml("defaults.yaml")
        return self._defaults

    def get_unit_defaults(self) -> Dict:
        """Zwraca domyślne wartości dla jednostek."""
        return self.get_defaults().get("unit_defaults", {})

    def get_game_config(self) -> GameConfig:
        """
        Zwraca ustawienia gry z sekcji `game`.

        Returns:
            GameConfig: Budżet, koszt rekrutacji, komenda startu
        """
        return GameConfig.from_dict(self.get_defaults().get("game", {}))

    # ─────────────────────────────────────────────────────────────────────────
    # ŁADOWANIE JEDNOSTEK
    # ─────────────────────────────────────────────────────────────────────────

    def _get_units_file(self) -> Dict:
        if self._units_file is None:
            self._units_file = self._load_yaml("units.yaml")
        return self._units_file

    def _get_all_units_raw(self) -> Dict:
        """Zwraca wszystkie surowe definicje jednostek."""
        return self._get_units_file().get("units", {})

    def load_unit(self, unit_id: str) -> Dict:
        """
        Wczytuje definicję jednostki z uzupełnionymi defaults.

        Args:
            unit_id: ID jednostki (klucz w units.yaml)

        Returns:
            Dict: Pełna definicja jednostki

        Raises:
            KeyError: Jeśli jednostka nie istnieje
        """
        units = self._get_all_units_raw()

        if unit_id not in units:
            raise KeyError(f"Unit '{unit_id}' not found in units.yaml")

        result = self._deep_merge(self.get_unit_defaults(), units[unit_id])
        result["id"] = unit_id

        return result

    def load_all_units(self) -> Dict[str, Dict]:
        """Wczytuje wszystkie definicje jednostek (unit_id -> definicja)."""
        units = self._get_all_units_raw()
        return {uid: self.load_unit(uid) for uid in units.keys()}

    def get_unit_ids(self) -> List[str]:
        """Zwraca listę wszystkich ID jednostek."""
        return list(self._get_all_units_raw().keys())

    def _build_units(self, section: str) -> List[Unit]:
        """Tworzy NOWE instancje jednostek z listy ID w sekcji units.yaml."""
        unit_ids = self._get_units_file().get(section, [])
        return [Unit.from_config(self.load_unit(uid)) for uid in unit_ids]

    def load_recruitment_pool(self) -> List[Unit]:
        """
        Tworzy pulę rekrutacji w stałej kolejności.

        Każde wywołanie zwraca świeże instancje.

        Raises:
            KeyError: Jeśli pula odwołuje się do nieznanej jednostki
        """
        return self._build_units("recruitment_pool")

    def load_enemy_team(self) -> List[Unit]:
        """Tworzy jednostki drużyny wroga w stałej kolejności."""
        return self._build_units("enemy_team")

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Głęboko łączy dwa słowniki.

        Override nadpisuje wartości w base.
        Nested dicts są merge'owane rekurencyjnie.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """
        Czyści cache i wymusza ponowne wczytanie plików.

        Przydatne podczas edycji plików YAML w runtime.
        """
        self._defaults = None
        self._units_file = None
