"""Tests for period resolution."""

from datetime import timedelta

import pytest

from goal_review.domain.errors import InvalidPeriodError
from goal_review.domain.reviews import Period
from goal_review.services.periods import parse_period, resolve_period
from tests.conftest import REFERENCE_NOW


@pytest.mark.parametrize(
    ("period", "days"),
    [("weekly", 7), ("monthly", 30), ("quarterly", 90)],
)
def test_resolve_period_spans_period_days(period: str, days: int) -> None:
    window = resolve_period(period, REFERENCE_NOW)

    assert window.end == REFERENCE_NOW
    assert window.start == REFERENCE_NOW - timedelta(days=days)
    assert window.period.days == days


def test_resolve_period_reads_naive_now_as_utc() -> None:
    window = resolve_period("weekly", REFERENCE_NOW.replace(tzinfo=None))

    assert window.end == REFERENCE_NOW
    assert window.start.tzinfo is not None


def test_resolve_period_defaults_to_current_time() -> None:
    window = resolve_period(Period.WEEKLY)

    assert window.end.tzinfo is not None
    assert window.end - window.start == timedelta(days=7)


def test_parse_period_normalizes_case() -> None:
    assert parse_period(" Monthly ") == Period.MONTHLY


@pytest.mark.parametrize("value", ["week", "daily", "", None])
def test_invalid_period_is_rejected(value: object) -> None:
    with pytest.raises(InvalidPeriodError) as exc_info:
        resolve_period(value, REFERENCE_NOW)  # type: ignore[arg-type]

    assert exc_info.value.value == value
