"""
Django Ninja API configuration.
"""

from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI
from ninja.errors import ValidationError

from apps.core.logging import get_logger
from apps.posts.api import router as posts_router

logger = get_logger(__name__)

api = NinjaAPI(
    title="TradeFlow API",
    version="1.0.0",
    description="Trade posts under moderated pillars.",
    openapi_extra={
        "tags": [
            {
                "name": "posts",
                "description": "Create and list trade posts",
            },
            {
                "name": "health",
                "description": "Service health checks",
            },
        ],
    },
)

# Register routers
api.add_router("/posts", posts_router)


@api.exception_handler(ValidationError)
def validation_error_handler(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    """Report request validation failures as 400 with the individual issues."""
    logger.info("request_validation_failed", issues=len(exc.errors))
    return api.create_response(request, {"detail": exc.errors}, status=400)


@api.get("/health", tags=["health"], operation_id="healthCheck", summary="Health check")
def health_check(request: HttpRequest) -> dict:
    """Health check endpoint for load balancer."""
    return {"status": "ok"}
