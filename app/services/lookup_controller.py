import logging
from itertools import count

from app.clients.pokeapi_client import PokeAPIClient
from app.models import KeyEvent, PokemonRecord, ViewState
from app.rendering import (
    LOADING_DETAIL,
    LOADING_RAW,
    NO_DATA,
    render_detail,
    render_error,
    render_raw,
    summarize,
)

logger = logging.getLogger(__name__)

CONFIRM_KEY = "Enter"


def is_confirm_key(event: KeyEvent) -> bool:
    return event.key == CONFIRM_KEY


def error_message(error: Exception) -> str:
    # Not-found errors carry a fixed detail; anything else shows its own message
    return getattr(error, "detail", None) or str(error)


class LookupController:
    """Owns the lookup page: the input field and the three output regions."""

    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client
        self._sequence = count(1)
        self._latest = 0
        self.input_value = ""
        self.view = ViewState()

    def set_input(self, value: str) -> None:
        self.input_value = value

    async def lookup(self, query: str) -> ViewState:
        """Writes the query into the input field, then submits it."""
        self.set_input(query)
        return await self.submit()

    async def handle_key(self, event: KeyEvent) -> ViewState | None:
        """Submits only when the confirm key was pressed; other keys do nothing."""
        if not is_confirm_key(event):
            return None
        return await self.submit()

    async def submit(self) -> ViewState:
        """
        Runs one lookup for the current input value.

        The loading state (and the request URL) is shown before the request is sent.
        The outcome replaces all regions at once; if a newer lookup started in the
        meantime, the outcome is returned but not shown.
        """
        query = self.input_value.lower()
        request_url = self._poke_client.build_url(query)
        sequence = next(self._sequence)
        self._latest = sequence

        self.view = ViewState(
            detail=LOADING_DETAIL,
            raw_json=LOADING_RAW,
            request_url=request_url,
            loading=True,
        )

        try:
            payload = await self._poke_client.fetch_pokemon(query)
            record = PokemonRecord.model_validate(payload)
            result = ViewState(
                detail=render_detail(summarize(record)),
                raw_json=render_raw(payload),
                request_url=request_url,
            )
        except Exception as e:
            message = error_message(e)
            logger.error(f"Lookup for '{query}' failed: {message}")
            result = ViewState(
                detail=render_error(message),
                raw_json=NO_DATA,
                request_url=request_url,
                error=message,
            )

        if sequence != self._latest:
            logger.info(f"Discarding stale result for '{query}' (lookup #{sequence})")
            return result

        self.view = result
        return result
