"""
Simulation router - rekrutacja z gotowych linii i bitwa.
"""

from fastapi import APIRouter
from pydantic import BaseModel
from typing import List, Dict, Any

from autochess.core.config_loader import ConfigLoader
from autochess.game import Game


router = APIRouter()

_loader = ConfigLoader()


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST/RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════════════════

class SimulationRequest(BaseModel):
    """Request do symulacji - linie wpisywane kolejno w rekrutacji."""
    selections: List[str]


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/simulate")
async def run_simulation(request: SimulationRequest) -> Dict[str, Any]:
    """
    Rozgrywa grę: linie `selections` trafiają do rekrutacji, potem bitwa.

    Linie po osiągnięciu READY są ignorowane.

    Returns:
        Wynik bitwy, pozostałe pieniądze i log zdarzeń; albo błąd,
        jeśli linie skończyły się przed komendą startu.
    """
    game = Game.from_loader(_loader)
    flow = game.recruitment()

    for line in request.selections:
        if flow.is_ready():
            break
        flow.submit(line)

    if not flow.is_ready():
        return {
            "error": f"Recruitment not finished: send '{flow.start_command}' after choosing heroes",
            "events": game.logger.get_events(),
        }

    result = game.battle().run()
    events = game.logger.get_events()

    return {
        "result": result,
        "money_left": game.state.money,
        "events": events,
        "total_events": len(events),
    }
