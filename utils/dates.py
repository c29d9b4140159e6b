from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today_iso() -> str:
    """Current date as YYYY-MM-DD."""
    return utcnow().date().isoformat()


def days_from_today(days: int) -> str:
    return (utcnow() + timedelta(days=days)).date().isoformat()
