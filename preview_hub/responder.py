"""Build responses for resolved pages."""

from starlette.responses import Response, PlainTextResponse

from .config import Config
from .models import Page, PageResponse, RouteTable, DEFAULT_ROUTES
from .loader import PageLoader
from .routing import resolve_page
from .exceptions import PageLoadError
from .logging_config import logger


class Responder:
    """
    Resolve a request target, read its page and build the response.

    Flow:
    1. Resolve target against the route table
    2. Read the page file
    3. Return 200 with the page bytes, or 500 if the read failed
    """

    def __init__(
        self,
        config: Config = None,
        routes: RouteTable = DEFAULT_ROUTES,
        loader: PageLoader = None,
    ):
        self.config = config or Config()
        self.routes = routes
        self.loader = loader or PageLoader(self.config, routes)

    async def render(self, target: str) -> PageResponse:
        """
        Build the response for a request target.

        Never raises for unreadable pages; those become a 500 response.
        """
        page = resolve_page(target, self.routes)

        try:
            content = await self.loader.load(page)
        except PageLoadError as e:
            logger.error(
                f"Error loading page for {target!r}",
                extra={"page": e.page, "file_path": e.file_path, "error": str(e)},
            )
            return self.failure(page)

        return self.success(page, content)

    def success(self, page: Page, content: bytes) -> PageResponse:
        return PageResponse(
            status_code=200,
            headers={
                "Content-Type": self.config.response.content_type,
                "Cache-Control": self.config.response.cache_control,
            },
            body=content,
            page=page,
        )

    def failure(self, page: Page = None) -> PageResponse:
        return PageResponse(
            status_code=500,
            body=self.config.response.error_body.encode("utf-8"),
            page=page,
        )


def to_response(page_response: PageResponse) -> Response:
    """Convert a PageResponse into a Starlette response."""
    if not page_response.ok:
        return PlainTextResponse(
            page_response.body,
            status_code=page_response.status_code,
            headers=page_response.headers,
        )

    # Content-Type is passed as a header so Starlette does not add a charset
    return Response(
        content=page_response.body,
        status_code=page_response.status_code,
        headers=page_response.headers,
    )
