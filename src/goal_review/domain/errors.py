"""Goal review errors."""

from uuid import UUID


class GoalReviewError(Exception):
    """Base class for goal review failures."""


class ProfileNotFoundError(GoalReviewError):
    """No profile or goals exist for the user."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"Profile not found for user {user_id}")
        self.user_id = user_id


class InvalidPeriodError(GoalReviewError, ValueError):
    """The review period is not one of weekly, monthly or quarterly."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid review period: {value!r}")
        self.value = value
