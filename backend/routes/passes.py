"""Game-pass listing route — resolve a universe, serve from cache or Roblox."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from errors import MissingUniverseError, UnresolvablePlaceError, failure_body
from routes.auth import require_api_key
from services.cache import PassCache
from services.roblox import RobloxClient

logger = logging.getLogger(__name__)

router = APIRouter()


async def _resolve_universe(
    roblox: RobloxClient,
    universe_id: str | None,
    place_id: str | None,
    user_id: str | None,
) -> str:
    """Pick the universe id: universeId, then placeId lookup, then userId."""
    if universe_id:
        return universe_id

    if place_id:
        resolved = await roblox.resolve_universe_id(place_id)
        if not resolved:
            raise UnresolvablePlaceError()
        return resolved

    # Older clients sent the universe id as userId
    if user_id:
        return user_id

    raise MissingUniverseError()


@router.get("/passes", dependencies=[Depends(require_api_key)])
async def get_passes(
    request: Request,
    universe_id: str | None = Query(None, alias="universeId"),
    place_id: str | None = Query(None, alias="placeId"),
    user_id: str | None = Query(None, alias="userId"),
):
    """Game passes for a universe, cached for the configured TTL."""
    cache: PassCache = request.app.state.pass_cache
    roblox: RobloxClient = request.app.state.roblox

    universe_id = await _resolve_universe(roblox, universe_id, place_id, user_id)

    key = cache.key_for(universe_id)
    entry = cache.get(key)
    if entry is not None and cache.is_fresh(entry):
        logger.info("Cache hit for universe %s", universe_id)
        return {"success": True, "passes": entry.data, "cached": True}

    logger.info("Fetching passes for universe %s", universe_id)
    try:
        passes = await roblox.fetch_game_passes(universe_id)
    except Exception as e:
        logger.exception("Error fetching passes for universe %s", universe_id)
        return JSONResponse(
            failure_body("Failed to fetch game passes", str(e)),
            status_code=500,
        )

    cache.set(key, passes)
    return {"success": True, "passes": passes, "cached": False}
