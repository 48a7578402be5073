from secret_santa.domain.models import Pairing, Participant, normalize_identifier

__all__ = [
    "Pairing",
    "Participant",
    "normalize_identifier",
]
