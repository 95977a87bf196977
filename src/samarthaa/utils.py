from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def normalize_email(value: str) -> str:
    """Normalize an email address for lookups (trimmed, lower-cased)."""
    return value.strip().lower()
