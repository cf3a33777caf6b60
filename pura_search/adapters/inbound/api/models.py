"""Pydantic models for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....config.settings import settings
from ....core.domain import (
    ContentCategory,
    ContentUpdate,
    EducationalContent,
    NewContent,
    SearchResponse,
    SearchResult,
)


class SearchRequest(BaseModel):
    """Request model for a smart search."""

    query: str = Field(
        ...,
        min_length=1,
        description="Keywords or phrase to search for, up to MAX_QUERY_LENGTH characters",
        json_schema_extra={"example": "temple architecture"},
    )
    category: ContentCategory | None = Field(
        None, description="Only search articles in this category"
    )

    @field_validator("query")
    @classmethod
    def query_not_blank_or_too_long(cls, value: str) -> str:
        """Reject blank or over-long queries before they reach the search engine."""
        if not value.strip():
            raise ValueError("Query cannot be empty or whitespace only")
        if len(value) > settings.max_query_length:
            raise ValueError(f"Query exceeds {settings.max_query_length} characters")
        return value


class ContentModel(BaseModel):
    """An educational article."""

    id: int = Field(..., description="Article id")
    title: str = Field(..., description="Article title")
    category: ContentCategory = Field(..., description="Content category")
    content: str = Field(..., description="Article body")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last modification time")

    @classmethod
    def from_domain(cls, content: EducationalContent) -> "ContentModel":
        return cls(
            id=content.id,
            title=content.title,
            category=content.category,
            content=content.content,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )


class SearchResultModel(BaseModel):
    """A single ranked search hit."""

    model_config = ConfigDict(populate_by_name=True)

    content: ContentModel = Field(..., description="The matched article")
    relevance_score: float = Field(
        ..., ge=0, le=1, alias="relevanceScore", description="Relevance score in [0, 1]"
    )
    excerpt: str = Field(..., description="Snippet around the best match")

    @classmethod
    def from_domain(cls, result: SearchResult) -> "SearchResultModel":
        return cls(
            content=ContentModel.from_domain(result.content),
            relevance_score=result.relevance_score,
            excerpt=result.excerpt,
        )


class SearchResponseModel(BaseModel):
    """Ranked search results, highest relevance first."""

    query: str = Field(..., description="The original query")
    results: list[SearchResultModel] = Field(default_factory=list, description="Ranked results")
    total: int = Field(..., ge=0, description="Number of results")

    @classmethod
    def from_domain(cls, response: SearchResponse) -> "SearchResponseModel":
        return cls(
            query=response.query,
            results=[SearchResultModel.from_domain(result) for result in response.results],
            total=response.total,
        )


class CreateContentRequest(BaseModel):
    """Request model for creating an article."""

    title: str = Field(..., min_length=1, description="Article title")
    category: ContentCategory = Field(..., description="Content category")
    content: str = Field(..., min_length=1, description="Article body")

    def to_domain(self) -> NewContent:
        return NewContent(title=self.title, category=self.category, content=self.content)


class UpdateContentRequest(BaseModel):
    """Request model for a partial article update."""

    title: str | None = Field(None, min_length=1, description="New title")
    category: ContentCategory | None = Field(None, description="New category")
    content: str | None = Field(None, min_length=1, description="New body")

    def to_domain(self) -> ContentUpdate:
        return ContentUpdate(title=self.title, category=self.category, content=self.content)


class DeleteResponse(BaseModel):
    """Response model for a delete."""

    success: bool = Field(..., description="True if the article existed and was deleted")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    corpus: str = Field(..., description="Corpus provider status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., PS_RET_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "CorpusUnavailableError", "code": "PS_RET_002", "message": "..."},
            "location": {"class": "SQLiteContentAdapter", "method": "list_content", ...},
            "context": {"db_path": "data/pura_search.db"},
            "stack_trace": ["Traceback...", ...]  # Only in debug mode
        }
    """

    error: ErrorDetail = Field(..., description="Error details including type, code, and message")
    location: ErrorLocation | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
