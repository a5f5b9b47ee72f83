"""Preview Hub - static HTML preview server.

Serves one of three HTML pages depending on the request target, with
client caching disabled.

Basic Usage:
    $ python scripts/serve_preview.py
    $ uvicorn preview_hub.api.main:app --host 0.0.0.0 --port 5000

Functional API:
    >>> from preview_hub import resolve_page, render_page
    >>> resolve_page("/embed")
    <Page.EMBED: 'embed.html'>
    >>> response = render_page("/dashboard")
    >>> response.status_code
    200

Components:
    - Routing: RouteTable, resolve_page
    - Loading: PageLoader
    - Responses: Responder, PageResponse
"""

__version__ = "0.1.0"

# Models
from .models import Page, RouteTable, PageResponse, DEFAULT_ROUTES

# Configuration
from .config import Config, PathConfig, ServerConfig, ResponseConfig

# Exceptions
from .exceptions import PreviewError, PageLoadError, ConfigurationError

# Components
from .routing import resolve_page, request_target
from .loader import PageLoader
from .responder import Responder, to_response

# Logging
from .logging_config import logger, setup_logging


# =============================================================================
# Convenience Functions (Functional API)
# =============================================================================

def render_page(
    target: str,
    config: Config = None,
) -> PageResponse:
    """
    Build the response for a request target outside of a running server.

    Args:
        target: Request target, e.g. "/embed"
        config: Optional configuration object

    Returns:
        PageResponse with status, headers and body
    """
    import anyio

    responder = Responder(config or Config())
    return anyio.run(responder.render, target)


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Version
    "__version__",
    # Models
    "Page",
    "RouteTable",
    "PageResponse",
    "DEFAULT_ROUTES",
    # Config
    "Config",
    "PathConfig",
    "ServerConfig",
    "ResponseConfig",
    # Exceptions
    "PreviewError",
    "PageLoadError",
    "ConfigurationError",
    # Components
    "resolve_page",
    "request_target",
    "PageLoader",
    "Responder",
    "to_response",
    # Logging
    "logger",
    "setup_logging",
    # Convenience functions
    "render_page",
]
