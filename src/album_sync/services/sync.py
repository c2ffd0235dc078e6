"""Sync run state machine: fetch, build the tree skeleton, enrich photos."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from album_sync.domain.errors import (
    CatalogFetchError,
    DetailFetchError,
    DetailWriteError,
    StorageSetupError,
)
from album_sync.domain.photos import Folder, Photo
from album_sync.services.catalog import DEFAULT_MAX_RESULTS, CatalogFetcher

_logger = logging.getLogger(__name__)


class ContentTree(Protocol):
    """Persistence interface for the local content tree."""

    async def reset_root(self) -> None:
        """Remove and recreate the content root."""

    async def create_album_directories(self, folders: Sequence[Folder]) -> None:
        """Create album directories and the featured directory."""

    async def write_album_indices(
        self, folders: Sequence[Folder], photos: Sequence[Photo]
    ) -> None:
        """Write album and featured index files."""

    async def write_photo_detail(self, photo: Photo) -> None:
        """Write a single photo's detail file(s)."""


class SyncState(Enum):
    """Lifecycle of a sync run."""

    IDLE = "idle"
    FETCHING_CATALOG = "fetching_catalog"
    BUILDING_SKELETON = "building_skeleton"
    ENRICHING_PHOTOS = "enriching_photos"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SyncReport:
    """Outcome of a sync run."""

    state: SyncState
    folders: int = 0
    photos: int = 0
    written: int = 0
    skipped: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is SyncState.DONE


@dataclass
class SyncOrchestrator:
    """Rebuilds the content tree from the remote catalog."""

    catalog: CatalogFetcher
    content_tree: ContentTree
    max_results: int = DEFAULT_MAX_RESULTS
    state: SyncState = SyncState.IDLE

    async def run(self) -> SyncReport:
        """Run a full sync and return its report."""
        self.state = SyncState.IDLE
        _logger.info("Starting sync")

        self.state = SyncState.FETCHING_CATALOG
        try:
            folders = await self.catalog.fetch_folders()
            photos = await self.catalog.fetch_all_photos(self.max_results)
        except CatalogFetchError as exc:
            _logger.error("Failed to fetch photos and folders, exiting: %s", exc)
            return self._fail(exc)
        _logger.info("Fetched %s folders and %s photos", len(folders), len(photos))

        self.state = SyncState.BUILDING_SKELETON
        try:
            await self.content_tree.reset_root()
            await self.content_tree.create_album_directories(folders)
            await self.content_tree.write_album_indices(folders, photos)
        except StorageSetupError as exc:
            _logger.error("Failed to create folders with indices, exiting: %s", exc)
            return self._fail(exc, folders=len(folders), photos=len(photos))

        self.state = SyncState.ENRICHING_PHOTOS
        report = SyncReport(
            state=self.state, folders=len(folders), photos=len(photos)
        )
        for photo in photos:
            if await self._enrich(photo):
                report.written += 1
            else:
                report.skipped.append(photo.public_id)

        self.state = SyncState.DONE
        report.state = self.state
        _logger.info(
            "Done: wrote %s photos, skipped %s", report.written, len(report.skipped)
        )
        return report

    async def _enrich(self, photo: Photo) -> bool:
        """Fetch and persist one photo's detail; return whether it was written."""
        try:
            detail = await self.catalog.fetch_photo_detail(photo.public_id)
            await self.content_tree.write_photo_detail(detail)
        except DetailFetchError as exc:
            _logger.warning("Failed to fetch %s - skipping: %s", photo.public_id, exc)
            return False
        except DetailWriteError as exc:
            _logger.warning("Failed to write %s - skipping: %s", photo.public_id, exc)
            return False
        _logger.info("Fetched and wrote: %s", photo.public_id)
        return True

    def _fail(self, exc: Exception, *, folders: int = 0, photos: int = 0) -> SyncReport:
        self.state = SyncState.FAILED
        return SyncReport(
            state=self.state, folders=folders, photos=photos, error=str(exc)
        )
