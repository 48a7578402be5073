from secret_santa.records.csv_files import (
    PAIRING_HEADER,
    read_participants,
    read_prior_pairings,
    write_pairings,
)

__all__ = [
    "PAIRING_HEADER",
    "read_participants",
    "read_prior_pairings",
    "write_pairings",
]
