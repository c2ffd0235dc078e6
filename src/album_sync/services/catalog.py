"""Catalog reads against the media service."""

import logging
from dataclasses import dataclass

import httpx

from album_sync.adapters.cloudinary_client import CloudinaryClient
from album_sync.domain.errors import (
    CatalogFetchError,
    DetailFetchError,
    MalformedRecordError,
)
from album_sync.domain.photos import Folder, Photo
from album_sync.domain.records import FolderListing, ResourceListing
from album_sync.services.normalizer import normalize

_logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 400

# Transport, non-2xx and undecodable bodies all surface as one of these.
_READ_ERRORS = (httpx.HTTPError, ValueError)


@dataclass
class CatalogFetcher:
    """Fetches folders and photos and shapes them into domain records."""

    client: CloudinaryClient

    async def fetch_folders(self) -> list[Folder]:
        """Return the full remote folder listing."""
        try:
            payload = await self.client.list_folders()
            listing = FolderListing.model_validate(payload)
        except _READ_ERRORS as exc:
            raise CatalogFetchError(
                f"Folder listing failed: {_describe(exc)}"
            ) from exc
        return [Folder(name=folder.name, path=folder.path) for folder in listing.folders]

    async def fetch_all_photos(
        self, max_results: int = DEFAULT_MAX_RESULTS
    ) -> list[Photo]:
        """Return up to ``max_results`` photos from the bulk listing."""
        try:
            payload = await self.client.list_images(max_results)
            listing = ResourceListing.model_validate(payload)
        except _READ_ERRORS as exc:
            raise CatalogFetchError(f"Photo listing failed: {_describe(exc)}") from exc

        photos: list[Photo] = []
        for resource in listing.resources:
            try:
                photos.append(normalize(resource))
            except MalformedRecordError as exc:
                _logger.warning(
                    "Ignoring malformed resource %s: %s",
                    resource.get("public_id", "<unknown>"),
                    exc,
                )
        return photos

    async def fetch_photo_detail(self, public_id: str) -> Photo:
        """Return the enriched record for one photo."""
        _logger.info("Requesting photo: %s", public_id)
        try:
            payload = await self.client.get_image(public_id)
            return normalize(payload)
        except _READ_ERRORS as exc:
            raise DetailFetchError(public_id, _describe(exc)) from exc


def _describe(exc: Exception) -> str:
    """Summarize a read failure, including the HTTP status when known."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return f"HTTP {status_code}: {exc}"
    return str(exc)
