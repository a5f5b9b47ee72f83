"""Asynchronous page file reads."""

from pathlib import Path

import anyio

from .config import Config
from .models import Page, RouteTable, DEFAULT_ROUTES
from .exceptions import PageLoadError


class PageLoader:
    """
    Read page files from the pages directory.

    Reads run in a worker thread so a slow disk never blocks
    other in-flight requests.
    """

    def __init__(self, config: Config = None, routes: RouteTable = DEFAULT_ROUTES):
        self.config = config or Config()
        self.routes = routes

    @property
    def pages_dir(self) -> Path:
        return self.config.paths.pages_dir

    def path_for(self, page: Page) -> Path:
        return self.routes.path_for(page, self.pages_dir)

    async def load(self, page: Page) -> bytes:
        """
        Read the raw bytes of a page.

        Raises:
            PageLoadError: If the file is missing, unreadable or not a file
        """
        file_path = self.path_for(page)

        try:
            return await anyio.Path(file_path).read_bytes()
        except OSError as e:
            raise PageLoadError(
                f"Failed to read {page.filename}: {e}",
                page=page.filename,
                file_path=str(file_path),
            ) from e

    def missing_pages(self) -> list[Page]:
        """Pages whose files are not present on disk."""
        return [page for page in self.routes.pages if not self.path_for(page).is_file()]
