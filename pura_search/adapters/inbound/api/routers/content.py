"""Educational content endpoints."""

import logging

from fastapi import APIRouter, status

from .....core.domain import ContentCategory
from .....core.domain.exceptions import ContentNotFoundError
from ..deps import get_content_repository
from ..models import (
    ContentModel,
    CreateContentRequest,
    DeleteResponse,
    ErrorResponse,
    UpdateContentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/content", tags=["content"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Article not found"}}


@router.get("", response_model=list[ContentModel])
def list_content(category: ContentCategory | None = None) -> list[ContentModel]:
    """List articles, newest first."""
    contents = get_content_repository().list_content(category)
    contents = sorted(contents, key=lambda c: (c.created_at, c.id), reverse=True)
    return [ContentModel.from_domain(content) for content in contents]


@router.get("/{content_id}", response_model=ContentModel, responses=_NOT_FOUND)
def get_content(content_id: int) -> ContentModel:
    """Get a single article."""
    content = get_content_repository().get_content(content_id)
    if content is None:
        raise ContentNotFoundError(
            f"Educational content {content_id} not found", context={"id": content_id}
        )
    return ContentModel.from_domain(content)


@router.post("", response_model=ContentModel, status_code=status.HTTP_201_CREATED)
def create_content(request: CreateContentRequest) -> ContentModel:
    """Create an article."""
    content = get_content_repository().create_content(request.to_domain())
    logger.info(f"Created educational content {content.id}: {content.title}")
    return ContentModel.from_domain(content)


@router.patch("/{content_id}", response_model=ContentModel, responses=_NOT_FOUND)
def update_content(content_id: int, request: UpdateContentRequest) -> ContentModel:
    """Update some fields of an article."""
    content = get_content_repository().update_content(content_id, request.to_domain())
    if content is None:
        raise ContentNotFoundError(
            f"Educational content {content_id} not found", context={"id": content_id}
        )
    return ContentModel.from_domain(content)


@router.delete("/{content_id}", response_model=DeleteResponse)
def delete_content(content_id: int) -> DeleteResponse:
    """Delete an article."""
    deleted = get_content_repository().delete_content(content_id)
    if deleted:
        logger.info(f"Deleted educational content {content_id}")
    return DeleteResponse(success=deleted)
