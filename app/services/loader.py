"""
Document loader.

Fetches a recipe page over HTTP(S) and hands back the raw HTML. Transport
problems are returned as error types rather than raised.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import httpx

from app.config import get_settings


@dataclass
class FetchResult:
    """Result of fetching a page."""
    html: Optional[str] = None
    status_code: Optional[int] = None
    error_type: Optional[str] = None  # invalid_url|fetch_status|fetch_timeout|fetch_failed

    @property
    def ok(self) -> bool:
        return self.html is not None and self.error_type is None


def is_valid_url(url: str) -> bool:
    """Only absolute http/https URLs are fetched."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class DocumentLoader:
    """Fetches raw HTML for the extraction pipeline."""

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None, transport=None):
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.user_agent = user_agent or settings.user_agent
        # Tests inject an httpx.MockTransport here
        self.transport = transport

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html",
        }

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page, returning its HTML or the reason it couldn't be fetched."""
        if not is_valid_url(url):
            return FetchResult(error_type="invalid_url")

        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=self.headers)
                response.raise_for_status()
                return FetchResult(html=response.text, status_code=response.status_code)

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            print(f"❌ Failed to fetch {url}: HTTP {status}")
            return FetchResult(status_code=status, error_type="fetch_status")

        except httpx.TimeoutException:
            print(f"❌ Timeout fetching {url}")
            return FetchResult(error_type="fetch_timeout")

        except httpx.HTTPError as e:
            print(f"❌ Failed to fetch {url}: {e}")
            return FetchResult(error_type="fetch_failed")


document_loader = DocumentLoader()
