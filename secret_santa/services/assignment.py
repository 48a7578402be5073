from __future__ import annotations

import random
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from secret_santa.core.errors import ArgumentError, AssignmentUnsatisfiable
from secret_santa.domain import Pairing, Participant
from secret_santa.services.registry import normalize

MAX_ATTEMPTS = 1000


def build_forbidden_map(
    participants: Sequence[Participant],
    prior_pairings: Optional[Iterable[Pairing]],
) -> Dict[str, str]:
    """Map giver identifier keys to the receiver they had last round.

    Only pairings whose giver and receiver are both still in ``participants``
    count. Later pairings for the same giver replace earlier ones.
    """
    current = {participant.identifier_key for participant in participants}
    forbidden: Dict[str, str] = {}
    for pairing in prior_pairings or ():
        giver_key = pairing.giver.identifier_key
        receiver_key = pairing.receiver.identifier_key
        if giver_key in current and receiver_key in current:
            forbidden[giver_key] = receiver_key
    return forbidden


def _is_allowed(giver: Participant, receiver: Participant, forbidden: Dict[str, str]) -> bool:
    if giver == receiver:
        return False
    return forbidden.get(giver.identifier_key) != receiver.identifier_key


def _try_assign(
    participants: Sequence[Participant],
    forbidden: Dict[str, str],
    rng: random.Random,
) -> Optional[List[Pairing]]:
    giving_order = list(participants)
    rng.shuffle(giving_order)
    available = list(participants)
    pairings: List[Pairing] = []

    for giver in giving_order:
        candidates = [receiver for receiver in available if _is_allowed(giver, receiver, forbidden)]
        if not candidates:
            return None
        receiver = rng.choice(candidates)
        pairings.append(Pairing(giver, receiver))
        available.remove(receiver)

    return pairings


def generate_assignments(
    participants: Optional[Sequence[Participant]],
    prior_pairings: Iterable[Pairing] = (),
    seed: Optional[int] = None,
    max_attempts: int = MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> List[Pairing]:
    if not participants:
        raise ArgumentError("At least one participant must be provided.")
    if max_attempts < 1:
        raise ArgumentError("max_attempts must be at least 1.")

    unique = normalize(participants)
    forbidden = build_forbidden_map(unique, prior_pairings)
    if rng is None:
        rng = random.Random(seed)

    for attempt in range(1, max_attempts + 1):
        pairings = _try_assign(unique, forbidden, rng)
        if pairings is not None:
            logger.bind(participants=len(unique)).debug(
                "Assignments found on attempt {attempt}", attempt=attempt
            )
            return pairings

    logger.bind(participants=len(unique), constraints=len(forbidden)).warning(
        "No valid assignment after {attempts} attempts", attempts=max_attempts
    )
    raise AssignmentUnsatisfiable(max_attempts)


def verify_assignments(
    participants: Sequence[Participant],
    pairings: Sequence[Pairing],
    prior_pairings: Iterable[Pairing] = (),
) -> List[str]:
    expected = set(participants)
    givers = Counter(pairing.giver for pairing in pairings)
    receivers = Counter(pairing.receiver for pairing in pairings)

    issues = []

    missing_givers = expected - set(givers)
    if missing_givers:
        issues.append(f"Missing givers: {sorted(str(p) for p in missing_givers)}")

    missing_receivers = expected - set(receivers)
    if missing_receivers:
        issues.append(f"Missing receivers: {sorted(str(p) for p in missing_receivers)}")

    unknown = (set(givers) | set(receivers)) - expected
    if unknown:
        issues.append(f"Unknown participants: {sorted(str(p) for p in unknown)}")

    duplicate_givers = [str(p) for p, count in givers.items() if count > 1]
    if duplicate_givers:
        issues.append(f"Duplicate givers: {sorted(duplicate_givers)}")

    duplicate_receivers = [str(p) for p, count in receivers.items() if count > 1]
    if duplicate_receivers:
        issues.append(f"Duplicate receivers: {sorted(duplicate_receivers)}")

    forbidden = build_forbidden_map(list(expected), prior_pairings)
    for pairing in pairings:
        if not _is_allowed(pairing.giver, pairing.receiver, forbidden):
            issues.append(f"Disallowed pairing: {pairing}")

    return issues
