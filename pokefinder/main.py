"""
Command-line entry point for PokeFinder.

Usage:
    pokefinder NAME_OR_ID     # Look up a Pokémon and print its details
    pokefinder --help         # Show this help

Set LOG_LEVEL=DEBUG (environment or .env) to see request logging.
"""

import asyncio
import sys
from loguru import logger

from .config import config
from .lookup import LookupResult, PokemonLookup


def format_result(result: LookupResult) -> str:
    """Render a successful lookup as plain text."""
    pokemon = result.pokemon
    lines = [
        "=" * 60,
        f"{pokemon.display_name} {pokemon.display_id}",
        "=" * 60,
        f"Types: {', '.join(name.title() for name in pokemon.type_names)}",
        f"Height: {pokemon.display_height}",
        f"Weight: {pokemon.display_weight}",
    ]
    if pokemon.image_url:
        lines.append(f"Image: {pokemon.image_url}")

    lines.append("\nPokedex Entry")
    lines.append(f"  {result.flavor_text_message}")

    lines.append("\nAbilities")
    for ability in pokemon.abilities:
        suffix = " (Hidden)" if ability.is_hidden else ""
        lines.append(f"  - {ability.display_name}{suffix}")

    lines.append("\nBase Stats")
    for stat in pokemon.stats:
        lines.append(f"  {stat.display_name:<8} {stat.base_stat:>3} / {stat.max_value}")

    return "\n".join(lines)


async def main(args=None) -> int:
    """
    Run one lookup from the command line.

    Returns:
        Process exit code
    """
    args = sys.argv[1:] if args is None else args

    if args and args[0] in ['--help', '-h', 'help']:
        print(__doc__)
        return 0

    logger.remove()
    logger.add(sys.stderr, format=config.log_format, level=config.log_level)

    term = " ".join(args)
    if not term.strip():
        print("Search term cannot be empty.")
        return 1

    async with PokemonLookup() as lookup:
        result = await lookup.search(term)

    if not result.ok:
        print(f"Error: {result.message}")
        return 1

    print(format_result(result))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
