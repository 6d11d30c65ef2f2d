"""
API package for PokeFinder.

Contains the PokeAPI client and its failure taxonomy.
"""

from .api_client import PokeAPIClient, normalize_search_term
from .errors import FailureKind, FetchFailure, failure_message

__all__ = [
    'PokeAPIClient',
    'normalize_search_term',
    'FailureKind',
    'FetchFailure',
    'failure_message',
]
