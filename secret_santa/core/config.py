import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_ATTEMPTS = 1000


@dataclass(frozen=True)
class Settings:
    participants_path: str
    output_path: str
    previous_path: Optional[str]
    seed: Optional[int]
    max_attempts: int
    log_level: str
    log_path: Optional[str]


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


def load_settings() -> Settings:
    participants_path = os.getenv("SANTA_PARTICIPANTS_FILE", "employees.csv")
    output_path = os.getenv("SANTA_OUTPUT_FILE", "secret_santa_assignments.csv")
    previous_path = os.getenv("SANTA_PREVIOUS_FILE", "previous_assignments.csv")
    seed = _int_from_env("SANTA_SEED", None)
    max_attempts = _int_from_env("SANTA_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/secret_santa.log")

    if not participants_path:
        raise ValueError("SANTA_PARTICIPANTS_FILE cannot be empty.")
    if not output_path:
        raise ValueError("SANTA_OUTPUT_FILE cannot be empty.")
    if max_attempts < 1:
        raise ValueError("SANTA_MAX_ATTEMPTS must be at least 1.")

    return Settings(
        participants_path=participants_path,
        output_path=output_path,
        previous_path=previous_path or None,
        seed=seed,
        max_attempts=max_attempts,
        log_level=log_level,
        log_path=log_path or None,
    )
