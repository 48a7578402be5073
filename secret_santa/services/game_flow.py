from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from secret_santa.core.errors import SecretSantaError
from secret_santa.domain import Pairing, Participant
from secret_santa.records import read_participants, read_prior_pairings, write_pairings
from secret_santa.services.assignment import MAX_ATTEMPTS, generate_assignments, verify_assignments
from secret_santa.services.registry import normalize

SUMMARY_RULE = "-" * 50


@dataclass(frozen=True)
class GameResult:
    pairings: List[Pairing]
    participants: List[Participant]
    prior_pairings_count: int
    output_path: Path


def format_summary(pairings: Sequence[Pairing]) -> str:
    lines = ["Assignment Summary:", SUMMARY_RULE]
    lines.extend(str(pairing) for pairing in pairings)
    lines.append(SUMMARY_RULE)
    return "\n".join(lines)


def run_game(
    participants_path: Union[str, Path],
    output_path: Union[str, Path],
    previous_path: Optional[Union[str, Path]] = None,
    seed: Optional[int] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> GameResult:
    try:
        logger.info("Starting Secret Santa game...")

        logger.info("Reading participants from: {path}", path=participants_path)
        participants = read_participants(participants_path)
        logger.info("Found {count} participants", count=len(participants))

        prior_pairings: List[Pairing] = []
        if previous_path:
            logger.info("Reading previous assignments from: {path}", path=previous_path)
            prior_pairings = read_prior_pairings(previous_path)
            logger.info("Found {count} previous assignments", count=len(prior_pairings))

        logger.info("Creating new Secret Santa assignments...")
        pairings = generate_assignments(
            participants,
            prior_pairings,
            seed=seed,
            max_attempts=max_attempts,
        )

        unique = normalize(participants)
        issues = verify_assignments(unique, pairings, prior_pairings)
        if issues:
            raise SecretSantaError("Generated assignments are invalid: " + "; ".join(issues))
        logger.info("Successfully created {count} assignments", count=len(pairings))

        logger.info("Writing assignments to: {path}", path=output_path)
        write_pairings(pairings, output_path)
        logger.bind(seed=seed).info("Secret Santa assignments saved successfully")
    except SecretSantaError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error: {error}", error=str(exc))
        raise SecretSantaError("An unexpected error occurred during Secret Santa game execution.") from exc

    return GameResult(
        pairings=pairings,
        participants=unique,
        prior_pairings_count=len(prior_pairings),
        output_path=Path(output_path),
    )
