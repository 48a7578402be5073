from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from secret_santa.core.errors import ArgumentError


def _require_text(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str):
        raise ArgumentError(f"{field_name} must be a string.")
    if not value.strip():
        raise ArgumentError(f"{field_name} is required.")
    return value


def normalize_identifier(identifier: str) -> str:
    return identifier.lower()


@dataclass(frozen=True, eq=False)
class Participant:
    """A group member, identified case-insensitively by name and identifier together."""

    display_name: str
    identifier: str

    def __post_init__(self) -> None:
        _require_text(self.display_name, "display_name")
        _require_text(self.identifier, "identifier")

    @property
    def identifier_key(self) -> str:
        return normalize_identifier(self.identifier)

    @property
    def key(self) -> Tuple[str, str]:
        return self.display_name.lower(), self.identifier_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.identifier})"


@dataclass(frozen=True)
class Pairing:
    giver: Participant
    receiver: Participant

    def __post_init__(self) -> None:
        if not isinstance(self.giver, Participant):
            raise ArgumentError("giver must be a Participant.")
        if not isinstance(self.receiver, Participant):
            raise ArgumentError("receiver must be a Participant.")
        if self.giver == self.receiver:
            raise ArgumentError(f"{self.giver} cannot be paired with themselves.")

    def __str__(self) -> str:
        return f"{self.giver.display_name} -> {self.receiver.display_name}"
