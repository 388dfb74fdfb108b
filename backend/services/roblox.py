"""Roblox public API client: place → universe lookup and game-pass listings.

Both endpoints are anonymous. No retries, and no timeout unless one is
configured.
"""

import logging

import httpx

from errors import UpstreamError

logger = logging.getLogger(__name__)

# Roblox caps game-pass pages at 100 entries
PASS_PAGE_LIMIT = 100


class RobloxClient:
    def __init__(
        self,
        apis_base_url: str = "https://apis.roblox.com",
        games_base_url: str = "https://games.roblox.com",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.apis_base_url = apis_base_url.rstrip("/")
        self.games_base_url = games_base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def resolve_universe_id(self, place_id: str) -> str | None:
        """Look up the universe a place belongs to. Returns None if unresolvable."""
        url = f"{self.apis_base_url}/universes/v1/places/{place_id}/universe"
        try:
            async with self._client() as client:
                resp = await client.get(url)
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Universe lookup failed for place %s: %s", place_id, e)
            return None

        universe_id = data.get("universeId") if isinstance(data, dict) else None
        if not universe_id:
            logger.warning("No universe found for place %s (status %d)", place_id, resp.status_code)
            return None
        return str(universe_id)

    async def fetch_game_passes(self, universe_id: str) -> list[dict]:
        """Fetch up to 100 game passes for a universe, ascending.

        Raises UpstreamError on a non-success status; transport and decode
        errors propagate unchanged.
        """
        url = f"{self.games_base_url}/v1/games/{universe_id}/game-passes"
        async with self._client() as client:
            resp = await client.get(url, params={"limit": PASS_PAGE_LIMIT, "sortOrder": "Asc"})
        if not resp.is_success:
            raise UpstreamError(resp.status_code)
        data = resp.json()

        if not isinstance(data, dict):
            return []
        return data.get("data") or []
