"""Centralized error handling with actionable messages."""
from pydantic import ValidationError


class InvalidConfiguration(ValueError):
    """Raised when an (offset, limit, total) configuration cannot be paginated."""

    def __init__(self, reasons: list[str]):
        self.reasons = list(reasons)
        super().__init__("; ".join(self.reasons) or "invalid configuration")


def describe_validation_error(e: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into 'field: message' strings."""
    reasons = []
    for err in e.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        reasons.append(f"{loc}: {msg}" if loc else msg)
    return reasons


def handle_error(e: Exception) -> str:
    """Return a human-readable, actionable error message."""
    if isinstance(e, InvalidConfiguration):
        return (
            f"Error: Invalid pagination configuration — {e}. "
            "offset must be >= 0 and below total, limit must be >= 1, "
            "total must be >= 0."
        )

    return f"Error: {type(e).__name__} — {str(e)}"
