"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient, PokemonNotFoundError, NOT_FOUND_MESSAGE

__all__ = [
    'PokeAPIClient',
    'PokemonNotFoundError',
    'NOT_FOUND_MESSAGE',
]
