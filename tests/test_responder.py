"""Tests for page loading and response building."""

import pytest

from preview_hub import render_page
from preview_hub.exceptions import PageLoadError, PreviewError
from preview_hub.loader import PageLoader
from preview_hub.models import Page
from preview_hub.responder import Responder, to_response


@pytest.fixture
def loader(config):
    return PageLoader(config)


@pytest.fixture
def responder(config):
    return Responder(config)


class TestPageLoader:
    @pytest.mark.anyio
    async def test_load(self, loader, page_contents) -> None:
        assert await loader.load(Page.EMBED) == page_contents["embed.html"]

    @pytest.mark.anyio
    async def test_missing_file(self, loader, pages_dir) -> None:
        (pages_dir / "index.html").unlink()

        with pytest.raises(PageLoadError) as exc_info:
            await loader.load(Page.INDEX)

        assert exc_info.value.page == "index.html"
        assert exc_info.value.file_path == str(pages_dir / "index.html")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert isinstance(exc_info.value, PreviewError)

    def test_missing_pages(self, loader, pages_dir) -> None:
        assert loader.missing_pages() == []

        (pages_dir / "embed.html").unlink()
        assert loader.missing_pages() == [Page.EMBED]

    def test_path_for(self, loader, pages_dir) -> None:
        assert loader.path_for(Page.DASHBOARD) == pages_dir / "dashboard.html"


class TestResponder:
    @pytest.mark.anyio
    async def test_render_success(self, responder, page_contents) -> None:
        response = await responder.render("/dashboard")

        assert response.ok
        assert response.page is Page.DASHBOARD
        assert response.body == page_contents["dashboard.html"]
        assert response.headers == {
            "Content-Type": "text/html",
            "Cache-Control": "no-cache, no-store, must-revalidate",
        }

    @pytest.mark.anyio
    async def test_render_failure(self, responder, pages_dir) -> None:
        (pages_dir / "embed.html").unlink()

        response = await responder.render("/embed")

        assert response.status_code == 500
        assert not response.ok
        assert response.body == b"Error loading page"
        assert response.headers == {}

    def test_to_response_success(self, responder) -> None:
        response = to_response(responder.success(Page.INDEX, b"<p>hi</p>"))

        assert response.status_code == 200
        assert response.body == b"<p>hi</p>"
        assert response.headers["content-type"] == "text/html"

    def test_to_response_failure(self, responder) -> None:
        response = to_response(responder.failure(Page.INDEX))

        assert response.status_code == 500
        assert response.body == b"Error loading page"
        assert response.headers["content-type"].startswith("text/plain")


def test_render_page(config, page_contents) -> None:
    response = render_page("/embed", config)
    assert response.status_code == 200
    assert response.body == page_contents["embed.html"]
