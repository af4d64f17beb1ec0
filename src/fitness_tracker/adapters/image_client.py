"""HTTP client for downloading meal photos."""

from dataclasses import dataclass

import httpx

from fitness_tracker.services.recognition import ImageClient


@dataclass
class HttpxImageClient(ImageClient):
    """Image download client using httpx."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 20.0

    @classmethod
    def create(cls, timeout_seconds: float = 20.0) -> "HttpxImageClient":
        """Create an image client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(follow_redirects=True),
            timeout_seconds=timeout_seconds,
        )

    async def download(self, url: str) -> bytes:
        """Download the image at a URL."""
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        content_type = response.headers.get("content-type", "")
        if content_type and not content_type.startswith("image/"):
            raise ValueError(f"Unexpected content type: {content_type}")
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
