"""Purchase-date eligibility for warranty claims."""

import enum
from datetime import UTC, datetime

WARRANTY_WINDOW_DAYS = 365
SECONDS_PER_DAY = 24 * 60 * 60


class DateCheck(enum.Enum):
    INVALID = "invalid"
    TOO_OLD = "too_old"
    TOO_NEW = "too_new"
    ELIGIBLE = "eligible"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    DateCheck.INVALID: "Please enter a valid purchase date.",
    DateCheck.TOO_OLD: f"Purchase date must be within the last {WARRANTY_WINDOW_DAYS} days.",
    DateCheck.TOO_NEW: "Purchase date cannot be in the future.",
    DateCheck.ELIGIBLE: "",
}


def check_purchase_date(
    date_string: str, window_days: int = WARRANTY_WINDOW_DAYS, now: datetime | None = None
) -> DateCheck:
    """Classify a purchase date against a trailing window ending at ``now``.

    A bare ``YYYY-MM-DD`` date is read as midnight UTC, and naive datetimes are
    taken to be UTC. Elapsed time is compared in fractional days, so a date
    exactly ``window_days`` old is still eligible. Never raises.
    """
    purchased = _parse(date_string)
    if purchased is None:
        return DateCheck.INVALID

    current = _utcnow() if now is None else _as_utc(now)
    elapsed_days = (current - purchased).total_seconds() / SECONDS_PER_DAY

    if elapsed_days < 0:
        return DateCheck.TOO_NEW
    if elapsed_days > window_days:
        return DateCheck.TOO_OLD
    return DateCheck.ELIGIBLE


def is_within_trailing_window(
    date_string: str, window_days: int = WARRANTY_WINDOW_DAYS, now: datetime | None = None
) -> bool:
    """Return True iff the date is 0 to ``window_days`` days before ``now``, inclusive."""
    return check_purchase_date(date_string, window_days, now) is DateCheck.ELIGIBLE


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _parse(date_string: str) -> datetime | None:
    if not isinstance(date_string, str):
        return None
    try:
        parsed = datetime.fromisoformat(date_string.strip())
    except ValueError:
        return None
    return _as_utc(parsed)
