"""API routes implementation."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException
from datetime import datetime, timezone

from .schemas import (
    PublishRequest,
    PublishResponse,
    HealthResponse,
    ErrorResponse,
)
from textpub.exceptions import PageValidationError
from ..urls import base_url_for, page_prefix_for

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_publish_request(request: Request) -> PublishRequest:
    """Parse the publish body from a JSON object or an HTML form.

    Raises:
        PageValidationError: If the body cannot be parsed or ``text`` is
            not a string
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except HTTPException:
            raise PageValidationError("Invalid request body")
        text = form.get("text")
        # File uploads under "text" are not text
        return PublishRequest(text=text if isinstance(text, str) else None)

    body = await request.body()
    if not body.strip():
        return PublishRequest()

    try:
        payload = await request.json()
    except ValueError:
        raise PageValidationError("Invalid request body")

    try:
        return PublishRequest.model_validate(payload)
    except ValidationError:
        raise PageValidationError("Text is required")


@router.post(
    "/publish",
    response_model=PublishResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or empty text"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Publish text",
    description=(
        "Sanitize and store text, returning the id and URL of its page. "
        "Accepts a JSON object or a form with a `text` field."
    ),
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": PublishRequest.model_json_schema(),
                },
                "application/x-www-form-urlencoded": {
                    "schema": PublishRequest.model_json_schema(),
                },
            },
        },
    },
)
async def publish_text(request: Request):
    """Publish a block of text as a page."""
    service = request.app.state.service
    config = request.app.state.config
    logger = request.app.state.logger

    try:
        body = await read_publish_request(request)
        record = await service.publish(
            text=body.text,
            base_url=base_url_for(request, config),
            path_prefix=page_prefix_for(request, config),
        )
    except PageValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Error publishing text")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to publish text")

    return PublishResponse(success=True, url=record.url, id=record.id)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service and its page store are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    payload = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        storage="healthy" if health["storage"] else "unhealthy",
        backend=health["backend"],
        timestamp=datetime.now(timezone.utc),
    )
    if not health["overall"]:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=payload.model_dump(mode="json"),
        )
    return payload
