"""
Lookup service for PokeFinder.

This module contains the logic that sits between a UI and the API client:
- Fetches a Pokémon for a search term
- Follows its species link to fetch the Pokédex flavor text
- Discards results of searches that were superseded while in flight
- Keeps simple statistics about the session
"""

from dataclasses import dataclass
from typing import Optional
from loguru import logger

from .api import PokeAPIClient, FetchFailure, failure_message
from .models import Pokemon, PokemonSpecies

NO_ENGLISH_ENTRY = "No English Pokedex entry found."


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of one search.

    Exactly one of `pokemon` and `failure` is set. The species lookup is a
    separate failure domain: `species_failure` never clears `pokemon`.
    """
    term: str
    pokemon: Optional[Pokemon] = None
    failure: Optional[FetchFailure] = None
    flavor_text: Optional[str] = None
    species_failure: Optional[FetchFailure] = None

    @property
    def ok(self) -> bool:
        return self.pokemon is not None

    @property
    def message(self) -> Optional[str]:
        """User-facing message for a failed search, None on success."""
        if self.failure is None:
            return None
        return failure_message(self.failure, self.term)

    @property
    def flavor_text_message(self) -> Optional[str]:
        """Text for the Pokédex entry panel, None if the search itself failed."""
        if self.pokemon is None:
            return None
        if self.species_failure is not None:
            return failure_message(self.species_failure, self.term)
        if self.flavor_text:
            return self.flavor_text
        return NO_ENGLISH_ENTRY


class PokemonLookup:
    """
    Runs searches against PokeAPI on behalf of a UI.

    Only the most recent search is "active". A search that is superseded
    while waiting on the network returns None instead of a result, and
    never issues its species request.
    """

    def __init__(self, api_client: Optional[PokeAPIClient] = None):
        """Initialize the lookup service."""
        self.api_client = api_client or PokeAPIClient()
        self._active_search = 0

        # Statistics tracking
        self.stats = {
            "searches_started": 0,
            "searches_completed": 0,
            "searches_discarded": 0,
            "entity_failures": 0,
            "species_failures": 0,
        }

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.api_client.aclose()

    def _begin_search(self) -> int:
        self._active_search += 1
        self.stats["searches_started"] += 1
        return self._active_search

    def _is_stale(self, search_id: int) -> bool:
        if search_id != self._active_search:
            logger.debug(f"Discarding result of superseded search {search_id}")
            self.stats["searches_discarded"] += 1
            return True
        return False

    async def search(self, term: str) -> Optional[LookupResult]:
        """
        Look up a Pokémon and its English Pokédex entry.

        Args:
            term: Name or id as typed by the user

        Returns:
            LookupResult, or None if a newer search started before this one finished
        """
        search_id = self._begin_search()
        logger.info(f"Search {search_id}: looking up {term!r}")

        result = await self.api_client.fetch_pokemon(term)
        if self._is_stale(search_id):
            return None

        if isinstance(result, FetchFailure):
            logger.warning(f"Search {search_id} failed: {result}")
            self.stats["entity_failures"] += 1
            self.stats["searches_completed"] += 1
            return LookupResult(term=term, failure=result)

        pokemon = result
        species = await self.api_client.fetch_species(pokemon.species.url)
        if self._is_stale(search_id):
            return None

        self.stats["searches_completed"] += 1

        if isinstance(species, PokemonSpecies):
            flavor_text = species.english_flavor_text
            if flavor_text is None:
                logger.info(f"No English flavor text for {pokemon.name}")
            return LookupResult(term=term, pokemon=pokemon, flavor_text=flavor_text)

        logger.warning(f"Species lookup for {pokemon.name} failed: {species}")
        self.stats["species_failures"] += 1
        return LookupResult(term=term, pokemon=pokemon, species_failure=species)


# Convenience function for direct use
async def lookup_pokemon(term: str, api_client: Optional[PokeAPIClient] = None) -> Optional[LookupResult]:
    """
    Run a single search, closing the client afterwards.

    Args:
        term: Name or id as typed by the user
        api_client: Client to use (a new one by default)

    Returns:
        The search result (never None here, since nothing supersedes it)
    """
    async with PokemonLookup(api_client) as lookup:
        return await lookup.search(term)
