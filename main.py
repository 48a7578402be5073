from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loguru import logger

from secret_santa.core.config import load_settings
from secret_santa.core.errors import SecretSantaError
from secret_santa.core.logging import setup_logging
from secret_santa.services import format_summary, run_game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Assign Secret Santa recipients, avoiding last round's pairings."
    )
    parser.add_argument("participants", nargs="?", help="CSV file with Employee_Name,Employee_EmailID")
    parser.add_argument("output", nargs="?", help="CSV file to write the new assignments to")
    parser.add_argument("previous", nargs="?", help="CSV file with the previous round's assignments")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible draw")
    parser.add_argument("--max-attempts", type=int, default=None, help="Attempts before giving up")
    parser.add_argument("--log-level", default=None, help="Console log level (default from LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_path)

    participants_path = args.participants or settings.participants_path
    output_path = args.output or settings.output_path
    previous_path = args.previous or settings.previous_path
    seed = args.seed if args.seed is not None else settings.seed
    max_attempts = args.max_attempts if args.max_attempts is not None else settings.max_attempts

    logger.info("Participants file     - {path}", path=participants_path)
    logger.info("Output file           - {path}", path=output_path)
    logger.info("Previous assignments  - {path}", path=previous_path or "none")

    try:
        result = run_game(
            participants_path,
            output_path,
            previous_path,
            seed=seed,
            max_attempts=max_attempts,
        )
    except SecretSantaError as exc:
        logger.error("{error}", error=str(exc))
        return 1

    print(format_summary(result.pairings))
    logger.info("Secret Santa game completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
