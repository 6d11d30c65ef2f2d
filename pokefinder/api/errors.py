"""
Failure taxonomy for the PokeAPI client.

Client calls never raise for expected failures. They return a
`FetchFailure` whose `kind` tells the caller what went wrong; the optional
`cause` keeps the underlying exception for logs only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    INVALID_ADDRESS = "invalid_address"
    TRANSPORT_FAILURE = "transport_failure"
    INVALID_RESPONSE = "invalid_response"
    DECODE_FAILURE = "decode_failure"
    NOT_FOUND = "not_found"
    SPECIES_NOT_FOUND = "species_not_found"


FAILURE_MESSAGES = {
    FailureKind.INVALID_ADDRESS: "Could not construct a valid request.",
    FailureKind.TRANSPORT_FAILURE: "Network request failed. Check your connection.",
    FailureKind.INVALID_RESPONSE: "Received an unexpected response from the server.",
    FailureKind.DECODE_FAILURE: "Could not interpret the server data.",
    FailureKind.NOT_FOUND: "Pokémon '{term}' not found.",
    FailureKind.SPECIES_NOT_FOUND: "Could not find species data for this Pokémon.",
}


@dataclass(frozen=True)
class FetchFailure:
    kind: FailureKind
    cause: Optional[Exception] = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.kind.value
        return f"{self.kind.value}: {self.cause}"


def failure_message(failure: FetchFailure, term: str = "") -> str:
    """
    Map a failure to the text shown to the user.

    Args:
        failure: The failure returned by the client
        term: The search term as the user typed it (used for NOT_FOUND)

    Returns:
        A user-facing message that never includes the underlying cause
    """
    return FAILURE_MESSAGES[failure.kind].format(term=term)
