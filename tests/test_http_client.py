"""Tests for the transport helpers and upstream URL construction."""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from app_store.api import AppStoreWebAPI
from utils import http_client
from utils.error_handling import RequestError


def mock_client_factory(handler, captured):
    def factory(**kwargs):
        captured.append(kwargs)
        return httpx.AsyncClient(
            headers=kwargs.get("headers"), transport=httpx.MockTransport(handler)
        )

    return factory


def test_merge_headers_later_wins():
    merged = http_client.merge_headers({"A": "1", "B": "1"}, None, {"B": "2"})

    assert merged == {"A": "1", "B": "2"}


def test_get_text_passes_request_options():
    captured = []
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="ok")

    with patch.object(http_client, "create_custom_client", side_effect=mock_client_factory(handler, captured)):
        body = asyncio.run(
            http_client.get_text(
                "https://example.com/x",
                headers={"X-Lib": "lib", "X-Both": "lib"},
                request_options={"headers": {"X-Both": "caller"}, "proxy": "http://proxy:8080", "timeout": 5},
            )
        )

    assert body == "ok"
    assert captured[0]["proxy"] == "http://proxy:8080"
    assert captured[0]["timeout"] == 5
    assert seen[0].headers["X-Lib"] == "lib"
    assert seen[0].headers["X-Both"] == "caller"
    assert "Mozilla" in seen[0].headers["User-Agent"]


def test_get_text_wraps_status_errors():
    def handler(request):
        return httpx.Response(404, text="missing")

    with patch.object(http_client, "create_custom_client", side_effect=mock_client_factory(handler, [])):
        with pytest.raises(RequestError) as exc_info:
            asyncio.run(http_client.get_text("https://example.com/missing"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.error_type == "not_found"


def test_get_text_wraps_network_errors():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with patch.object(http_client, "create_custom_client", side_effect=mock_client_factory(handler, [])):
        with pytest.raises(RequestError) as exc_info:
            asyncio.run(http_client.get_text("https://example.com/down"))

    assert exc_info.value.error_type == "connection"
    assert exc_info.value.status_code is None


# ---------------------------------------------------------------------------
# Upstream URLs
# ---------------------------------------------------------------------------


def capture_urls():
    calls = []

    async def fake_get_text(url, *, headers=None, request_options=None):
        calls.append({"url": url, "headers": headers, "request_options": request_options})
        return ""

    return calls, patch("app_store.api.get_text", new=fake_get_text)


def test_search_url():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.search("puzzle game", "us", 20, lang="en-us"))

    url = calls[0]["url"]
    assert url.startswith("https://itunes.apple.com/search?")
    assert "term=puzzle+game" in url
    assert "media=software" in url
    assert "entity=software" in url
    assert "limit=20" in url
    assert "lang=en-us" in url


def test_lookup_url():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.lookup([1, 2], "id", "gb"))

    assert calls[0]["url"] == "https://itunes.apple.com/lookup?id=1,2&country=gb&entity=software"


def test_ratings_page_sends_store_front_header():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.fetch_ratings_page(553834731, "GB", {"headers": {"X-Extra": "1"}}))

    assert calls[0]["url"] == "https://itunes.apple.com/gb/customer-reviews/id553834731?displayable-kind=11"
    assert calls[0]["headers"] == {"X-Apple-Store-Front": "143444,12"}
    assert calls[0]["request_options"] == {"headers": {"X-Extra": "1"}}


def test_suggest_url_escapes_term():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.fetch_suggestions("angry birds/2"))

    assert calls[0]["url"].endswith("clientApplication=Software&term=angry%20birds%2F2")


def test_app_page_and_reviews_urls():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.fetch_app_page(42, "US"))
        asyncio.run(AppStoreWebAPI.fetch_reviews(42, "us", 3, "mostrecent"))

    assert calls[0]["url"] == "https://apps.apple.com/us/app/id42"
    assert calls[1]["url"] == "https://itunes.apple.com/us/rss/customerreviews/page=3/id=42/sortby=mostrecent/json"


def test_list_url():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.fetch_list("topfreeapplications", 6014, 25, "gb"))
        asyncio.run(AppStoreWebAPI.fetch_list("newapplications", None, 50, "us"))

    base = "https://itunes.apple.com/WebObjects/MZStoreServices.woa/ws/RSS"
    assert calls[0]["url"] == f"{base}/topfreeapplications/genre=6014/limit=25/json?s=143444"
    assert calls[1]["url"] == f"{base}/newapplications/limit=50/json?s=143441"


def test_search_url_with_device():
    calls, patcher = capture_urls()
    with patcher:
        asyncio.run(AppStoreWebAPI.search("notes", "us", 10, entity="iPadSoftware"))

    assert "entity=iPadSoftware" in calls[0]["url"]
