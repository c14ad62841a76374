"""Validation helpers."""

def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def ensure_text(value, field: str) -> str:
    """Return ``value`` if it is a non-empty string, else raise ``ValueError``."""
    ensure(isinstance(value, str), f"{field} must be a string")
    ensure(value != "", f"{field} must not be empty")
    return value
