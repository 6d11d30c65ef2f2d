"""
PokeFinder - look up a Pokémon by name or id on PokeAPI.
"""

from .api import PokeAPIClient, FailureKind, FetchFailure, failure_message, normalize_search_term
from .lookup import LookupResult, PokemonLookup, lookup_pokemon
from .models import Pokemon, PokemonSpecies, english_flavor_text

__all__ = [
    'PokeAPIClient',
    'FailureKind',
    'FetchFailure',
    'failure_message',
    'normalize_search_term',
    'LookupResult',
    'PokemonLookup',
    'lookup_pokemon',
    'Pokemon',
    'PokemonSpecies',
    'english_flavor_text',
]
