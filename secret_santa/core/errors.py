from __future__ import annotations


class SecretSantaError(RuntimeError):
    pass


class ArgumentError(SecretSantaError, ValueError):
    pass


class InsufficientParticipants(SecretSantaError):
    pass


class AssignmentUnsatisfiable(SecretSantaError):
    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Unable to create valid Secret Santa assignments after {attempts} attempts. "
            "This might be due to too many constraints from previous assignments."
        )
        self.attempts = attempts


class RecordError(SecretSantaError):
    pass
