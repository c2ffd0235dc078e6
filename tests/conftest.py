"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field

import httpx
import pytest

from album_sync.adapters.cloudinary_client import CloudinaryClient
from album_sync.adapters.filesystem_content_tree import FilesystemContentTree
from album_sync.config import Settings
from album_sync.domain.errors import DetailWriteError
from album_sync.domain.photos import Photo


def make_resource(public_id: str, **overrides: object) -> dict[str, object]:
    """Build a raw image resource as the media service returns it."""
    resource: dict[str, object] = {
        "public_id": public_id,
        "format": "jpg",
        "version": 1,
        "created_at": "2020-05-01T10:00:00Z",
        "width": 800,
        "height": 600,
        "bytes": 12345,
    }
    resource.update(overrides)
    return resource


@dataclass
class FakeCloudinaryClient(CloudinaryClient):
    """In-memory media catalog that records detail requests."""

    folders: list[dict[str, str]] = field(default_factory=list)
    resources: list[dict[str, object]] = field(default_factory=list)
    details: dict[str, dict[str, object]] = field(default_factory=dict)
    fail_listing: bool = False
    failing_details: set[str] = field(default_factory=set)
    requested: list[str] = field(default_factory=list)
    max_results_seen: list[int] = field(default_factory=list)

    async def list_folders(self) -> dict[str, object]:
        return {"folders": list(self.folders)}

    async def list_images(self, max_results: int) -> dict[str, object]:
        self.max_results_seen.append(max_results)
        if self.fail_listing:
            raise httpx.ConnectError("network down")
        return {"resources": list(self.resources[:max_results])}

    async def get_image(self, public_id: str) -> dict[str, object]:
        self.requested.append(public_id)
        if public_id in self.failing_details:
            request = httpx.Request("GET", f"https://api.test/{public_id}")
            raise httpx.HTTPStatusError(
                "server error",
                request=request,
                response=httpx.Response(500, request=request),
            )
        if public_id in self.details:
            return self.details[public_id]
        for resource in self.resources:
            if resource["public_id"] == public_id:
                return resource
        raise KeyError(public_id)


@dataclass
class FlakyContentTree(FilesystemContentTree):
    """Filesystem tree whose detail writes fail for selected photos."""

    failing_writes: set[str] = field(default_factory=set)

    async def write_photo_detail(self, photo: Photo) -> None:
        if photo.public_id in self.failing_writes:
            raise DetailWriteError(photo.public_id, "disk full")
        await super().write_photo_detail(photo)


@pytest.fixture(autouse=True)
def _restore_app_logger():
    logger = logging.getLogger("album_sync")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        cloudinary_api_key="key",
        cloudinary_api_secret="secret",
        cloudinary_cloud_name="portfolio",
        content_root=tmp_path / "albums",
    )


@pytest.fixture
def catalog_client() -> FakeCloudinaryClient:
    return FakeCloudinaryClient(
        folders=[{"name": "trips", "path": "trips"}],
        resources=[
            make_resource("trips/paris", tags=["featured"]),
        ],
        details={
            "trips/paris": make_resource(
                "trips/paris",
                tags=["featured"],
                colors=[["#FFFFFF", 42.5], ["#000000", 10]],
                image_metadata={"Make": "Fuji"},
            )
        },
    )
