"""
FastAPI Backend dla Console Auto-Battler.

Endpoints:
    GET  /api/health         - health check
    GET  /api/units          - pula rekrutacji
    GET  /api/units/{index}  - jeden kandydat (numer od 1)
    POST /api/simulate       - rekrutacja z listy linii + bitwa
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.routers import units, simulation


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown events."""
    print("Auto-Battler API starting...")
    yield
    print("Auto-Battler API shutting down...")


app = FastAPI(
    title="Auto-Battler API",
    description="Batch API for the console auto-battler",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS - allow all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(units.router, prefix="/api", tags=["Units"])
app.include_router(simulation.router, prefix="/api", tags=["Simulation"])


@app.get("/api/health")
async def health():
    """API health check."""
    return {"status": "healthy"}
