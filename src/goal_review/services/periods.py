"""Resolve symbolic review periods into concrete windows."""

from datetime import UTC, datetime, timedelta

from goal_review.domain.errors import InvalidPeriodError
from goal_review.domain.reviews import Period, PeriodWindow


def as_utc(moment: datetime) -> datetime:
    """Return the instant with naive values read as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def parse_period(raw: Period | str) -> Period:
    """Return the Period for a raw value or raise InvalidPeriodError."""
    if isinstance(raw, Period):
        return raw
    try:
        return Period(str(raw).strip().lower())
    except ValueError as exc:
        raise InvalidPeriodError(raw) from exc


def resolve_period(
    period: Period | str, now: datetime | None = None
) -> PeriodWindow:
    """Return the window ending at now and spanning the period's days."""
    resolved = parse_period(period)
    end = as_utc(now or datetime.now(tz=UTC))
    return PeriodWindow(
        period=resolved,
        start=end - timedelta(days=resolved.days),
        end=end,
    )
