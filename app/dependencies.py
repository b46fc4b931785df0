from app.clients import PokeAPIClient
from app.services import LookupController
from fastapi import Depends

_poke_client = None
_lookup_controller = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_lookup_controller(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> LookupController:
    # One controller per process: it holds the page state shared by every request
    global _lookup_controller
    if _lookup_controller is None:
        _lookup_controller = LookupController(poke_client=poke_client)
    return _lookup_controller

async def close_clients():
    global _poke_client, _lookup_controller
    if _poke_client is not None:
        await _poke_client.close()
    _poke_client = None
    _lookup_controller = None
