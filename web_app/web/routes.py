"""Web interface routes implementation."""

import asyncio
import os

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, FileResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from textpub.common.i18n import get_message, get_messages, format_timestamp
from textpub.qr import qr_data_url
from ..urls import page_url_for

router = APIRouter()
page_router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")
templates = Jinja2Templates(directory=template_dir)


@router.get("/", include_in_schema=False)
async def homepage(request: Request):
    """Serve the static editor page."""
    html_file = os.path.join(template_dir, "index.html")

    if os.path.exists(html_file):
        return FileResponse(html_file, media_type="text/html")

    return HTMLResponse(
        content="<h1>textpub</h1><p>POST {\"text\": ...} to /api/publish</p>",
        status_code=200,
    )


def _not_found(locale: str) -> PlainTextResponse:
    return PlainTextResponse(
        content=get_message("not_found", locale),
        status_code=status.HTTP_404_NOT_FOUND,
    )


@page_router.get("/{page_id}", response_class=HTMLResponse, include_in_schema=False)
async def view_page(request: Request, page_id: str):
    """Render a published page with a QR code linking back to it.

    Lookup failures of any kind are reported as a plain-text 404.
    """
    service = request.app.state.service
    config = request.app.state.config
    logger = request.app.state.logger
    locale = config.locale

    try:
        record = await service.get_page(page_id)
        if record is None:
            return _not_found(locale)

        # Built from the current request, not record.url
        page_url = page_url_for(request, config, record.id)
        qr_image = await asyncio.to_thread(
            qr_data_url,
            page_url,
            box_size=config.qr_box_size,
            border=config.qr_border,
        )

        return templates.TemplateResponse(
            request,
            "page.html",
            {
                "t": get_messages(locale),
                "page_url": page_url,
                "qr_image": qr_image,
                "content": service.render_text(record),
                "published_at": format_timestamp(
                    record.created_at, locale, config.display_timezone
                ),
                "published_iso": record.created_at.isoformat(),
            },
        )
    except Exception:
        logger.exception(f"Error loading page {page_id!r}")
        return _not_found(locale)
