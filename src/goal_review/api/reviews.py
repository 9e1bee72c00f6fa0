"""Goal review endpoints with shared-token auth."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from goal_review.domain.errors import InvalidPeriodError, ProfileNotFoundError
from goal_review.services.recommendations import sort_by_priority

if TYPE_CHECKING:
    from goal_review.containers import AppContainer
    from goal_review.domain.reviews import GoalReview

router = APIRouter(prefix="/users", tags=["goal-review"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _to_payload(value: object) -> object:
    """Convert frozen domain values into plain containers for JSON encoding."""
    if is_dataclass(value) and not isinstance(value, type):
        return {
            item.name: _to_payload(getattr(value, item.name)) for item in fields(value)
        }
    if isinstance(value, Mapping):
        return {key: _to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_payload(item) for item in value]
    return value


def _generate(request: Request, user_id: UUID, period: str | None) -> GoalReview:
    container: AppContainer = request.app.state.container
    try:
        return container.review_service.generate_review(
            user_id, period or container.settings.default_period
        )
    except ProfileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except InvalidPeriodError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/{user_id}/goal-review", dependencies=[Depends(require_token)])
async def goal_review(
    user_id: UUID, request: Request, period: str | None = None
) -> dict[str, object]:
    """Return a freshly generated goal review."""
    return {"review": _to_payload(_generate(request, user_id, period))}


@router.get(
    "/{user_id}/goal-review/recommendations", dependencies=[Depends(require_token)]
)
async def goal_review_recommendations(
    user_id: UUID, request: Request, period: str | None = None
) -> dict[str, object]:
    """Return the review's recommendations, highest priority first."""
    review = _generate(request, user_id, period)
    ordered = sort_by_priority(list(review.recommendations))
    return {"recommendations": _to_payload(ordered)}
