"""
Configuration for PokeFinder.

The API location is fixed; only logging is tunable from the environment
(or a `.env` file next to the project).
"""

import os
from pathlib import Path

from dotenv import load_dotenv


def _load_env() -> None:
    """Load .env from the project root if present."""
    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    else:
        load_dotenv(override=False)


_load_env()


class Config:
    """Settings shared by the API client, the lookup service and the CLI."""

    pokeapi_base_url = "https://pokeapi.co/api/v2"
    pokemon_endpoint = "pokemon"

    log_format = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()

    @property
    def pokemon_base_url(self) -> str:
        """Collection root that search terms are appended to."""
        return f"{self.pokeapi_base_url}/{self.pokemon_endpoint}/"


config = Config()
