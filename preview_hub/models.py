"""Data models for the preview server."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


class Page(Enum):
    """Pages the server can serve. The value is the file name."""

    INDEX = "index.html"
    EMBED = "embed.html"
    DASHBOARD = "dashboard.html"

    @property
    def filename(self) -> str:
        return self.value


@dataclass(frozen=True)
class RouteTable:
    """
    Static mapping from exact request targets to pages.

    Targets are compared with plain string equality in insertion order;
    anything unmatched resolves to ``default``.
    """

    routes: Mapping[str, Page] = field(default_factory=dict)
    default: Page = Page.INDEX

    def __post_init__(self):
        # Freeze the mapping so the table cannot change after startup
        object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))

    def resolve(self, target: str) -> Page:
        for route, page in self.routes.items():
            if target == route:
                return page
        return self.default

    def path_for(self, page: Page, pages_dir: Path) -> Path:
        return Path(pages_dir) / page.filename

    @property
    def pages(self) -> list[Page]:
        """All pages reachable through this table, default last."""
        pages = list(dict.fromkeys(self.routes.values()))
        if self.default not in pages:
            pages.append(self.default)
        return pages


DEFAULT_ROUTES = RouteTable(
    routes={
        "/embed": Page.EMBED,
        "/dashboard": Page.DASHBOARD,
    },
    default=Page.INDEX,
)


@dataclass
class PageResponse:
    """A response built for a single request."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    page: Page = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200
