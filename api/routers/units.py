"""
Units router - pula rekrutacji.
"""

from fastapi import APIRouter
from typing import List, Dict, Any

from autochess.core.config_loader import ConfigLoader
from autochess.units.unit import Unit


router = APIRouter()

_loader = ConfigLoader()


def _unit_info(index: int, unit: Unit, cost: int) -> Dict[str, Any]:
    return {
        "index": index,
        "name": unit.name,
        "kind": unit.kind.value,
        "health": unit.health,
        "damage": unit.damage,
        "cost": cost,
    }


@router.get("/units")
async def get_units() -> List[Dict[str, Any]]:
    """
    Zwraca pulę rekrutacji w kolejności menu.

    Returns:
        Lista kandydatów z numerem (od 1), statystykami i kosztem.
    """
    cost = _loader.get_game_config().hero_cost
    pool = _loader.load_recruitment_pool()
    return [_unit_info(i, unit, cost) for i, unit in enumerate(pool, start=1)]


@router.get("/units/{index}")
async def get_unit(index: int) -> Dict[str, Any]:
    """
    Zwraca kandydata o numerze `index` (od 1).

    Args:
        index: Numer w puli
    """
    pool = _loader.load_recruitment_pool()
    if not 1 <= index <= len(pool):
        return {"error": f"Unit #{index} not found in the recruitment pool"}
    return _unit_info(index, pool[index - 1], _loader.get_game_config().hero_cost)
