"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class PublishRequest(BaseModel):
    """Request to publish a block of text."""

    text: Optional[str] = Field(None, description="Rich text (HTML) to publish")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"text": "<h1>Hello</h1><p>This is <b>published</b> text.</p>"}
            ]
        }
    }


class PublishResponse(BaseModel):
    """Response after publishing text."""

    success: bool = Field(True, description="Always true on success")
    url: str = Field(..., description="Canonical URL of the published page")
    id: str = Field(..., description="Page identifier")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "url": "https://example.com/p/aB3dEf7hJk",
                    "id": "aB3dEf7hJk"
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    storage: str = Field(..., description="Storage status")
    backend: str = Field(..., description="Storage backend in use")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
