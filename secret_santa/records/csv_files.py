from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from loguru import logger

from secret_santa.core.errors import ArgumentError, RecordError
from secret_santa.domain import Pairing, Participant

PAIRING_HEADER = [
    "Employee_Name",
    "Employee_EmailID",
    "Secret_Child_Name",
    "Secret_Child_EmailID",
]

PathLike = Union[str, Path]


def _read_rows(path: Path) -> List[Tuple[int, List[str]]]:
    """Return every row paired with the physical line it ends on."""
    text = path.read_bytes().decode("utf-8-sig")
    reader = csv.reader(io.StringIO(text))
    return [(reader.line_num, row) for row in reader]


def _is_blank(row: Sequence[str]) -> bool:
    return not any(field.strip() for field in row)


def read_participants(path: Optional[PathLike]) -> List[Participant]:
    if not path or not str(path).strip():
        raise RecordError("Participant file path cannot be empty.")

    path = Path(path)
    if not path.is_file():
        raise RecordError(f"Participant file not found: {path}")

    try:
        rows = _read_rows(path)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise RecordError(f"Error reading participant file: {exc}") from exc

    if not rows:
        raise RecordError("Participant file is empty.")

    participants: List[Participant] = []
    # first row is the header
    for line_number, row in rows[1:]:
        if _is_blank(row):
            continue
        if len(row) < 2:
            raise RecordError(f"Invalid data format at line {line_number}: {','.join(row)}")

        name, identifier = row[0].strip(), row[1].strip()
        if not name or not identifier:
            raise RecordError(f"Participant name and email cannot be empty at line {line_number}")
        participants.append(Participant(name, identifier))

    if not participants:
        raise RecordError("No valid participants found in the file.")

    logger.bind(path=str(path)).debug("Read {count} participants", count=len(participants))
    return participants


def read_prior_pairings(path: Optional[PathLike]) -> List[Pairing]:
    if not path or not str(path).strip():
        return []

    path = Path(path)
    if not path.is_file():
        logger.bind(path=str(path)).info("No previous assignments file found")
        return []

    try:
        rows = _read_rows(path)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.bind(path=str(path)).warning(
            "Ignoring unreadable previous assignments: {error}", error=str(exc)
        )
        return []

    pairings: List[Pairing] = []
    for line_number, row in rows[1:]:
        if _is_blank(row):
            continue
        if len(row) < 4:
            logger.bind(path=str(path), line=line_number).warning("Skipping short previous assignment row")
            continue
        try:
            giver = Participant(row[0].strip(), row[1].strip())
            receiver = Participant(row[2].strip(), row[3].strip())
            pairings.append(Pairing(giver, receiver))
        except ArgumentError as exc:
            logger.bind(path=str(path), line=line_number).warning(
                "Skipping invalid previous assignment: {error}", error=str(exc)
            )

    return pairings


def write_pairings(pairings: Optional[Sequence[Pairing]], path: Optional[PathLike]) -> None:
    if pairings is None:
        raise ArgumentError("pairings is required.")
    if not path or not str(path).strip():
        raise ArgumentError("Output file path cannot be empty.")

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh)
            writer.writerow(PAIRING_HEADER)
            for pairing in pairings:
                writer.writerow(
                    [
                        pairing.giver.display_name,
                        pairing.giver.identifier,
                        pairing.receiver.display_name,
                        pairing.receiver.identifier,
                    ]
                )
    except OSError as exc:
        raise RecordError(f"Error writing assignments to file: {exc}") from exc

    logger.bind(path=str(path)).debug("Wrote {count} assignments", count=len(pairings))
