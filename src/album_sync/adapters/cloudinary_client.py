"""Cloudinary Admin API client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class CloudinaryClient(Protocol):
    """Interface for media catalog reads."""

    async def list_folders(self) -> dict[str, object]:
        """Return the raw root folder listing."""

    async def list_images(self, max_results: int) -> dict[str, object]:
        """Return the raw bulk image listing, tags included."""

    async def get_image(self, public_id: str) -> dict[str, object]:
        """Return the raw detail record for one image."""


@dataclass
class HttpxCloudinaryClient(CloudinaryClient):
    """HTTPX-backed Cloudinary client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls,
        *,
        base_url: str,
        api_key: str,
        api_secret: str,
        timeout: float | None = None,
    ) -> "HttpxCloudinaryClient":
        """Create a client with a managed, basic-auth httpx session."""
        http_client = httpx.AsyncClient(auth=(api_key, api_secret), timeout=timeout)
        return cls(base_url=base_url.rstrip("/"), http_client=http_client)

    async def list_folders(self) -> dict[str, object]:
        """Fetch the folder listing."""
        return await self._get(f"{self.base_url}/folders")

    async def list_images(self, max_results: int) -> dict[str, object]:
        """Fetch up to ``max_results`` image resources with their tags."""
        return await self._get(
            f"{self.base_url}/resources/image",
            params={"max_results": max_results, "tags": "true"},
        )

    async def get_image(self, public_id: str) -> dict[str, object]:
        """Fetch one image with metadata and color data."""
        return await self._get(
            f"{self.base_url}/resources/image/upload/{quote(public_id, safe='/')}",
            params={"image_metadata": "true", "colors": "true"},
        )

    async def _get(
        self, url: str, params: dict[str, object] | None = None
    ) -> dict[str, object]:
        response = await self.http_client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
