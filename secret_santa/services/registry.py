from __future__ import annotations

from typing import Iterable, List, Optional, Set

from secret_santa.core.errors import ArgumentError, InsufficientParticipants
from secret_santa.domain import Participant

MIN_PARTICIPANTS = 2


def normalize(participants: Optional[Iterable[Participant]]) -> List[Participant]:
    if participants is None:
        raise ArgumentError("participants is required.")

    seen: Set[Participant] = set()
    unique: List[Participant] = []
    for participant in participants:
        if not isinstance(participant, Participant):
            raise ArgumentError(f"Expected a Participant, got {participant!r}.")
        if participant in seen:
            continue
        seen.add(participant)
        unique.append(participant)

    if len(unique) < MIN_PARTICIPANTS:
        raise InsufficientParticipants(
            f"At least {MIN_PARTICIPANTS} unique participants are required for Secret Santa."
        )
    return unique
