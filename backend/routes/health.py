"""Health check and service info routes."""

from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Lightweight liveness check — no external calls."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/")
async def index() -> dict:
    return {
        "message": "Roblox Pass API",
        "endpoints": {
            "/passes": "GET - Fetch game passes (params: universeId or placeId)",
            "/health": "GET - Health check",
        },
    }
