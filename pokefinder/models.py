"""
Data models for PokeFinder.

These Pydantic models mirror the JSON returned by PokeAPI for the
`/pokemon/{name}` and `/pokemon-species/{id}` endpoints. Field names match
the wire names, so decoding is a plain `model_validate_json`. Models are
strict: a value of the wrong JSON type (`"25"` for an int, `"yes"` for a
bool) is rejected rather than coerced, and any mismatch surfaces as a
`ValidationError`. Arrays decode to tuples so records stay immutable.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


STAT_ORDER = (
    "hp",
    "attack",
    "defense",
    "special-attack",
    "special-defense",
    "speed",
)

STAT_DISPLAY_NAMES = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special-attack": "Sp. Atk",
    "special-defense": "Sp. Def",
    "speed": "Speed",
}

# Highest base value seen per stat, used to scale stat bars
STAT_MAX_VALUES = {
    "hp": 255,
    "attack": 190,
    "defense": 230,  # Shuckle
    "special-attack": 194,
    "special-defense": 230,  # Shuckle
    "speed": 200,
}
DEFAULT_STAT_MAX = 200

ENGLISH = "en"


class APIModel(BaseModel):
    """Base for every record decoded from the API: immutable, strictly typed, extra keys ignored."""
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


class NamedResource(APIModel):
    """A `{name, url}` pair, PokeAPI's standard link to another resource."""
    name: str
    url: str


class Sprites(APIModel):
    front_default: Optional[str] = None


class TypeSlot(APIModel):
    slot: int
    type: NamedResource


class AbilitySlot(APIModel):
    ability: NamedResource
    is_hidden: bool
    slot: int

    @property
    def display_name(self) -> str:
        """Ability name for humans, e.g. 'lightning-rod' -> 'Lightning Rod'."""
        return self.ability.name.replace("-", " ").title()


class StatEntry(APIModel):
    base_stat: int
    effort: int
    stat: NamedResource

    @property
    def name(self) -> str:
        return self.stat.name

    @property
    def display_name(self) -> str:
        return STAT_DISPLAY_NAMES.get(self.stat.name, self.stat.name.title())

    @property
    def max_value(self) -> int:
        return STAT_MAX_VALUES.get(self.stat.name, DEFAULT_STAT_MAX)


class Pokemon(APIModel):
    """
    Represents a Pokémon as received from `/pokemon/{name-or-id}`.

    Height is in decimetres and weight in hectograms, exactly as the API
    sends them. The `species` link points at the record holding the
    Pokédex flavor text.
    """
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    sprites: Sprites
    types: tuple[TypeSlot, ...] = Field(min_length=1, max_length=2)
    height: int
    weight: int
    abilities: tuple[AbilitySlot, ...]
    stats: tuple[StatEntry, ...]
    species: NamedResource

    @field_validator('stats')
    @classmethod
    def validate_stats(cls, v):
        """Every Pokémon carries the same six stats in the same order."""
        names = tuple(entry.stat.name for entry in v)
        if names != STAT_ORDER:
            raise ValueError(f'Expected stats {list(STAT_ORDER)}, got: {list(names)}')
        return v

    @property
    def display_name(self) -> str:
        return self.name.title()

    @property
    def display_id(self) -> str:
        return f"#{self.id:03d}"

    @property
    def display_height(self) -> str:
        return f"{self.height / 10} m"

    @property
    def display_weight(self) -> str:
        return f"{self.weight / 10} kg"

    @property
    def image_url(self) -> Optional[str]:
        return self.sprites.front_default

    @property
    def type_names(self) -> list[str]:
        return [slot.type.name for slot in self.types]

    @property
    def main_type(self) -> Optional[str]:
        return self.types[0].type.name.title() if self.types else None


class FlavorTextEntry(APIModel):
    flavor_text: str
    language: NamedResource
    version: NamedResource


class PokemonSpecies(APIModel):
    """
    Represents the subset of `/pokemon-species/{id}` we care about.

    Entries are kept in API order; no language is guaranteed to be present.
    """
    flavor_text_entries: tuple[FlavorTextEntry, ...]

    @property
    def english_flavor_text(self) -> Optional[str]:
        return english_flavor_text(self)


def english_flavor_text(species: PokemonSpecies) -> Optional[str]:
    """
    Return the first English flavor text with line breaks flattened.

    The API embeds newlines and form feeds (U+000C) from the original game
    text; each one becomes a single space.

    Returns:
        The cleaned text, or None when the species has no English entry
    """
    entry = next(
        (e for e in species.flavor_text_entries if e.language.name == ENGLISH),
        None,
    )
    if entry is None:
        return None

    return entry.flavor_text.replace("\n", " ").replace("\f", " ")
