"""Route resolution for incoming requests."""

from starlette.requests import Request

from .models import Page, RouteTable, DEFAULT_ROUTES


def resolve_page(target: str, routes: RouteTable = DEFAULT_ROUTES) -> Page:
    """
    Map a request target to the page that should be served.

    Args:
        target: Request target as sent by the client (path plus optional query)
        routes: Route table to resolve against

    Returns:
        The matching page, or the table's default page
    """
    if not isinstance(target, str):
        return routes.default
    return routes.resolve(target)


def request_target(request: Request) -> str:
    """Rebuild the request target (path and query string) from the ASGI scope."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        # Some servers include the query string in raw_path
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.scope.get("path", "")

    query = request.scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path
