from secret_santa.services.assignment import (
    MAX_ATTEMPTS,
    build_forbidden_map,
    generate_assignments,
    verify_assignments,
)
from secret_santa.services.game_flow import GameResult, format_summary, run_game
from secret_santa.services.registry import normalize

__all__ = [
    "MAX_ATTEMPTS",
    "build_forbidden_map",
    "generate_assignments",
    "verify_assignments",
    "GameResult",
    "format_summary",
    "run_game",
    "normalize",
]
