from typing import Optional, Type, TypeVar, Union
import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from ..config import config
from ..models import Pokemon, PokemonSpecies
from .errors import FailureKind, FetchFailure


ModelT = TypeVar("ModelT", bound=BaseModel)


def normalize_search_term(name_or_id: str) -> str:
    """
    Prepare a user-supplied name or id for the URL.

    PokeAPI matches names in lower case; lower-casing a numeric id is a no-op.
    """
    return name_or_id.strip().lower()


class PokeAPIClient:
    """
    Client for the public PokeAPI.

    This class handles:
    - Fetching a Pokémon by name or id
    - Fetching the species record linked from a Pokémon
    - Classifying every failure into a FetchFailure value
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Collection root for Pokémon lookups (defaults to config value)
            transport: Custom httpx transport, used by tests to serve canned responses
        """
        self.base_url = base_url or config.pokemon_base_url

        self.client = httpx.AsyncClient(
            headers={
                'Accept': 'application/json',
            },
            transport=transport,
            follow_redirects=True,
        )

        logger.debug(f"Initialized API client with base URL: {self.base_url}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - cleanup the HTTP client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client and its connection pool."""
        await self.client.aclose()

    async def _fetch_json(
        self,
        address: str,
        model: Type[ModelT],
        not_found: FailureKind,
    ) -> Union[ModelT, FetchFailure]:
        """
        GET `address` and decode the JSON body into `model`.

        Args:
            address: Absolute URL of the resource
            model: Pydantic model the body must match
            not_found: Failure kind to report for a 404

        Returns:
            The decoded record, or a FetchFailure describing what went wrong
        """
        try:
            url = httpx.URL(address)
        except httpx.InvalidURL as e:
            logger.warning(f"Could not build a request URL from {address!r}: {e}")
            return FetchFailure(FailureKind.INVALID_ADDRESS, e)

        if url.scheme not in ("http", "https") or not url.host:
            logger.warning(f"Request URL {address!r} has no http(s) scheme or host")
            return FetchFailure(FailureKind.INVALID_ADDRESS)

        logger.info(f"Fetching {model.__name__} from: {url}")

        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Network error when fetching {url}: {e!r}")
            return FetchFailure(FailureKind.TRANSPORT_FAILURE, e)

        logger.debug(f"Response status: {response.status_code}")

        if response.status_code == 404:
            logger.info(f"{model.__name__} not found (404): {url}")
            return FetchFailure(not_found)

        if not response.is_success:
            logger.warning(f"HTTP error {response.status_code} when fetching {url}")
            return FetchFailure(FailureKind.INVALID_RESPONSE)

        try:
            record = model.model_validate_json(response.content)
        except (ValidationError, ValueError) as e:
            logger.error(f"Failed to decode {model.__name__} from {url}: {e}")
            logger.debug(f"Response content: {response.text[:200]}...")
            return FetchFailure(FailureKind.DECODE_FAILURE, e)

        return record

    async def fetch_pokemon(self, name_or_id: str) -> Union[Pokemon, FetchFailure]:
        """
        Fetch a Pokémon by name or national dex id.

        Args:
            name_or_id: Search term as typed by the user

        Returns:
            Pokemon on success; FetchFailure with NOT_FOUND for an unknown
            or empty term, or any other kind for transport/response/decode errors
        """
        search_term = normalize_search_term(name_or_id)
        if not search_term:
            logger.warning("Empty search term - reporting as not found")
            return FetchFailure(FailureKind.NOT_FOUND)

        result = await self._fetch_json(
            self.base_url + search_term,
            Pokemon,
            FailureKind.NOT_FOUND,
        )

        if isinstance(result, Pokemon):
            logger.success(f"Successfully fetched Pokémon {result.id}: {result.name}")
        return result

    async def fetch_species(self, url: str) -> Union[PokemonSpecies, FetchFailure]:
        """
        Fetch the species record linked from a Pokémon.

        Args:
            url: The `species.url` link taken verbatim from a Pokemon record

        Returns:
            PokemonSpecies on success; FetchFailure with SPECIES_NOT_FOUND for
            a 404, or any other kind for transport/response/decode errors
        """
        result = await self._fetch_json(url, PokemonSpecies, FailureKind.SPECIES_NOT_FOUND)

        if isinstance(result, PokemonSpecies):
            logger.success(f"Successfully fetched {len(result.flavor_text_entries)} flavor text entries")
        return result

    async def health_check(self) -> bool:
        """
        Check if PokeAPI is accessible.

        Returns:
            True if API is accessible, False otherwise
        """
        try:
            response = await self.client.get(f"{self.base_url}1")
            is_healthy = response.status_code in (200, 404)  # 404 still proves the API answered

            if is_healthy:
                logger.success("PokeAPI health check passed")
            else:
                logger.warning(f"PokeAPI health check failed: {response.status_code}")

            return is_healthy

        except httpx.HTTPError as e:
            logger.error(f"PokeAPI health check failed: {e!r}")
            return False
