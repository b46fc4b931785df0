import httpx
import logging
from app.config import settings

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Pokémon not found"

# Raised for every non-OK response, whatever the real status was
class PokemonNotFoundError(Exception):
    def __init__(self, status_code: int, detail: str = NOT_FOUND_MESSAGE):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail

# Default for the timeout argument; None is a real value meaning "no timeout"
FROM_SETTINGS = object()

class PokeAPIClient:
    def __init__(self, base_url: str = None, timeout=FROM_SETTINGS):
        # Use settings if base_url or timeout not provided
        if base_url is None:
            base_url = settings.pokeapi_base_url
        if timeout is FROM_SETTINGS:
            timeout = settings.pokeapi_timeout
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(timeout=timeout)

    def build_url(self, query: str) -> str:
        """Returns the request target for a normalized query.

        The query is interpolated as-is: no trimming and no URL-encoding.
        """
        return f"{self.base_url}/pokemon/{query}"

    async def fetch_pokemon(self, query: str) -> dict:
        """Issues a single GET for the query and returns the decoded JSON body."""
        url = self.build_url(query)
        logger.info(f"Fetching Pokemon: {url}")

        response = await self.client.get(url)

        if not response.is_success:
            # No status-specific branching: 404, 429 and 500 all look the same to the page
            logger.warning(f"PokeAPI returned status {response.status_code} for '{query}'")
            raise PokemonNotFoundError(status_code=response.status_code)

        # A body that is not JSON raises the decoder's own error
        return response.json()

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
