"""FastAPI application for the preview server."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..config import Config
from ..responder import Responder
from ..logging_config import setup_logging, logger

from .routes import pages_router


def startup_messages(config: Config) -> list[str]:
    """Lines announcing where the server is listening."""
    base_url = config.server.base_url
    return [
        f"Development hub running at {base_url}",
        f"Embed preview available at {base_url}/embed",
    ]


def create_app(config: Config = None) -> FastAPI:
    """Create the preview application."""
    config = config or Config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle - startup and shutdown."""
        setup_logging(config.paths.logs_dir, config.server.log_level)

        for page in app.state.responder.loader.missing_pages():
            logger.warning(
                f"Page file missing: {page.filename}",
                extra={"page": page.filename},
            )
        for line in startup_messages(config):
            logger.info(line)

        yield

    app = FastAPI(
        title="Preview Hub",
        description="Static HTML preview server",
        version=__version__,
        lifespan=lifespan,
        # Every path must reach the page router
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.config = config
    app.state.responder = Responder(config)

    app.include_router(pages_router)

    return app


app = create_app()
