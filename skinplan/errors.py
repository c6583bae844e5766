"""
Error taxonomy for the plan engine.

The engine has no I/O, so the only failure class is malformed input.
"""

from pydantic import ValidationError


class InvalidInput(ValueError):
    """Survey response cannot be turned into a plan."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors: list[str] = errors or [message]

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInput":
        errors = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err["loc"]) or "survey"
            errors.append(f"{location}: {err['msg']}")
        return cls(f"Invalid survey response ({len(errors)} error(s))", errors)
