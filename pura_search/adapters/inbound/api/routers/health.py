"""Health check endpoints."""

from fastapi import APIRouter

from ..deps import get_corpus
from ..models import HealthResponse

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        HealthResponse with current status and version.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        corpus="not_checked",
    )


@router.get("/ready", response_model=HealthResponse)
def readiness_check() -> HealthResponse:
    """Readiness probe.

    Checks that the corpus provider can load articles.

    Returns:
        HealthResponse with detailed status.
    """
    try:
        corpus = get_corpus()
        total = len(corpus.list_content())
        corpus_status = f"connected ({total} articles via {type(corpus).__name__})"
    except Exception as e:
        corpus_status = f"error: {str(e)}"

    return HealthResponse(
        status="ready",
        version=API_VERSION,
        corpus=corpus_status,
    )
