#!/usr/bin/env python3
"""
PokeFinder - Main Entry Point

Usage:
    python main.py pikachu      # Look up a Pokémon by name
    python main.py 25           # Look up a Pokémon by national dex id
    python main.py --help       # Show this help
"""

import sys
import asyncio
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent))

from pokefinder.main import main


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
