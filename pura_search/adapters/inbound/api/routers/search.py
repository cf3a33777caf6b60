"""Smart search endpoint."""

import logging

from fastapi import APIRouter

from ..deps import get_search_service
from ..models import ErrorResponse, SearchRequest, SearchResponseModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponseModel,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid query"},
        503: {"model": ErrorResponse, "description": "Corpus unavailable"},
    },
)
def smart_search(request: SearchRequest) -> SearchResponseModel:
    """Search educational content by keywords.

    Args:
        request: Query and optional category filter.

    Returns:
        SearchResponseModel with results ranked by relevance.
    """
    service = get_search_service()
    response = service.search(request.query, request.category)
    return SearchResponseModel.from_domain(response)
