"""Exception handlers mapping blogger errors onto HTTP responses.

Persistence errors are left to FastAPI's default 500 handling.
"""

import logging
from html import escape

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

from blogger.domain.errors import PostNotFoundError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all blogger error handlers on the FastAPI app."""

    @app.exception_handler(PostNotFoundError)
    async def post_not_found_handler(request: Request, exc: PostNotFoundError) -> HTMLResponse:
        logger.info("Not found on %s: %s", request.url.path, exc)
        return HTMLResponse(
            f"<h1>Not Found</h1><p>{escape(str(exc))}</p>",
            status_code=status.HTTP_404_NOT_FOUND,
        )
