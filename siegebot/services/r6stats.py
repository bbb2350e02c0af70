"""
R6Stats API client.

Fetches a player's ranked/casual stats and, optionally, their per-operator
stats, and turns the JSON into a PlayerRecord.
"""

import asyncio
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from siegebot.config import Config
from siegebot.data_models.player import PlayerRecord
from siegebot.utils.exceptions import PlayerNotFoundError, StatsProviderError
from siegebot.utils.logger import setup_logger

logger = setup_logger(__name__)


class R6StatsClient:
    """Async client for the R6Stats player endpoints."""
    
    def __init__(self, base_url: str = None, timeout: float = None,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the client.
        
        Args:
            base_url: API root, defaults to Config.R6STATS_API_URL
            timeout: Total seconds allowed per request, defaults to Config.R6STATS_TIMEOUT
            session: Existing aiohttp session to reuse; created lazily otherwise
        """
        self.base_url = (base_url or Config.R6STATS_API_URL).rstrip('/')
        self.timeout = aiohttp.ClientTimeout(total=timeout or Config.R6STATS_TIMEOUT)
        self._session = session
        self._owns_session = session is None
    
    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session
    
    async def close(self):
        """Close the underlying HTTP session if this client created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
    
    async def _get_json(self, path: str, handle: str, platform: str) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        session = self._get_session()
        try:
            async with session.get(url, params={'platform': platform}, timeout=self.timeout) as resp:
                if resp.status == 404:
                    raise PlayerNotFoundError(handle, platform)
                if resp.status >= 400:
                    text = await resp.text()
                    raise StatsProviderError(handle, f"HTTP {resp.status}: {text[:200]}", status=resp.status)
                try:
                    return await resp.json(content_type=None)
                except ValueError as e:
                    raise StatsProviderError(handle, f"invalid JSON from {url}: {e}", status=resp.status)
        except asyncio.TimeoutError:
            raise StatsProviderError(handle, f"request to {url} timed out")
        except aiohttp.ClientError as e:
            raise StatsProviderError(handle, f"request to {url} failed: {e}")
    
    async def get_player(self, handle: str, platform: str = None,
                         include_operators: bool = False) -> PlayerRecord:
        """
        Fetch a player's stats.
        
        Args:
            handle: Account name as typed by the user
            platform: Provider platform identifier, defaults to Config.R6STATS_PLATFORM
            include_operators: Also fetch per-operator stats
            
        Returns:
            PlayerRecord for the account
            
        Raises:
            PlayerNotFoundError: The provider has no such account
            StatsProviderError: The provider could not be reached or answered badly
        """
        platform = platform or Config.R6STATS_PLATFORM
        player_path = f"/players/{quote(handle, safe='')}"
        
        logger.debug(f"Fetching stats for {handle} on {platform} (operators={include_operators})")
        body = await self._get_json(player_path, handle, platform)
        player_data = body.get('player') if isinstance(body, dict) else None
        if not player_data:
            raise PlayerNotFoundError(handle, platform)
        
        operator_records = None
        if include_operators:
            operators_body = await self._get_json(f"{player_path}/operators", handle, platform)
            if isinstance(operators_body, dict):
                operator_records = operators_body.get('operator_records') or []
            else:
                operator_records = []
        
        try:
            return PlayerRecord.from_api(player_data, operator_records)
        except (TypeError, ValueError, AttributeError) as e:
            raise StatsProviderError(handle, f"unexpected player data: {e}")
