"""roundimage microservice -- FastAPI application.

Endpoints:
    POST /render        -- Render an uploaded image as a round view (PNG)
    GET  /health        -- Health check
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError

from .canvas import encode_png
from .style import RoundImageStyle
from .view import RoundImageView

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

VERSION = "0.1.0"
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_VIEW_SIZE = 2048

SUPPORTED_CONTENT_TYPES = (
    "image/png",
    "image/jpeg",
    "image/webp",
    "image/gif",
    "image/svg+xml",
)

app = FastAPI(
    title="roundimage",
    description="Renders images clipped to a circle with an optional ring border",
    version=VERSION,
)


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


@app.post(
    "/render",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "Rendered round view"},
        413: {"description": "Upload too large"},
        422: {"description": "Invalid input"},
    },
)
async def render_endpoint(
    file: UploadFile = File(...),
    width: int = Form(..., ge=1, le=MAX_VIEW_SIZE),
    height: int = Form(..., ge=1, le=MAX_VIEW_SIZE),
    border_width: int = Form(default=0, ge=0),
    border_color: str = Form(default="#FFFFFFFF"),
) -> Response:
    """Render the uploaded image clipped to a circle in a width x height view.

    An image that cannot be decoded renders as an empty view (ring only).
    """
    if file.content_type and file.content_type not in SUPPORTED_CONTENT_TYPES:
        raise HTTPException(
            status_code=422,
            detail=(
                f"Unsupported image type: {file.content_type}. "
                "Use PNG, JPEG, WebP, GIF, or SVG."
            ),
        )

    image_bytes = await file.read()
    if len(image_bytes) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Image too large (max 10MB)")

    try:
        style = RoundImageStyle(border_width=border_width, border_color=border_color)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)[0]["msg"])

    view = RoundImageView(style)
    view.set_size(width, height)
    if not view.set_image_bytes(image_bytes):
        logger.info("render_without_image", filename=file.filename)

    try:
        image = view.draw()
        png_bytes = encode_png(image)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("render_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    logger.debug("render_response", width=width, height=height, bytes=len(png_bytes))
    return Response(content=png_bytes, media_type="image/png")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service="roundimage",
        version=VERSION,
    )
