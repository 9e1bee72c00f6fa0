"""FastAPI application factory."""

from fastapi import FastAPI

from goal_review.api.reviews import router as reviews_router
from goal_review.app_logging import configure_logging
from goal_review.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Goal Review Engine")
    app.state.container = container

    app.include_router(reviews_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
