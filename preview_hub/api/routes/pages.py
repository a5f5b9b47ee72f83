"""Page endpoint."""

import time

from fastapi import APIRouter, Depends, Request

from ..dependencies import get_responder
from ...responder import Responder, to_response
from ...routing import request_target
from ...logging_config import logger

router = APIRouter(tags=["pages"])

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{full_path:path}", methods=METHODS, include_in_schema=False)
async def serve_page(
    request: Request,
    responder: Responder = Depends(get_responder),
):
    """Serve the page mapped to the request target."""
    start = time.perf_counter()
    target = request_target(request)

    page_response = await responder.render(target)

    logger.info(
        f"{request.method} {target} -> {page_response.status_code}",
        extra={
            "method": request.method,
            "path": target,
            "page": page_response.page.filename if page_response.page else None,
            "status_code": page_response.status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 2),
        },
    )

    return to_response(page_response)
