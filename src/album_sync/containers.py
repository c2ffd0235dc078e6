"""Dependency container wiring for the sync job."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from album_sync.adapters.cloudinary_client import (
    CloudinaryClient,
    HttpxCloudinaryClient,
)
from album_sync.adapters.filesystem_content_tree import FilesystemContentTree
from album_sync.config import Settings
from album_sync.services.catalog import CatalogFetcher
from album_sync.services.sync import SyncOrchestrator


@dataclass
class AppContainer:
    """Holds job-wide dependencies."""

    settings: Settings
    cloudinary_client: CloudinaryClient
    catalog_fetcher: CatalogFetcher
    content_tree: FilesystemContentTree
    sync_orchestrator: SyncOrchestrator
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    cloudinary_client = HttpxCloudinaryClient.create(
        base_url=resolved_settings.api_base_url(),
        api_key=resolved_settings.cloudinary_api_key,
        api_secret=resolved_settings.cloudinary_api_secret,
        timeout=resolved_settings.http_timeout_seconds,
    )
    catalog_fetcher = CatalogFetcher(cloudinary_client)
    content_tree = FilesystemContentTree(resolved_settings.content_root)
    sync_orchestrator = SyncOrchestrator(
        catalog=catalog_fetcher,
        content_tree=content_tree,
        max_results=resolved_settings.max_results,
    )

    async def close_resources() -> None:
        await cloudinary_client.close()

    return AppContainer(
        settings=resolved_settings,
        cloudinary_client=cloudinary_client,
        catalog_fetcher=catalog_fetcher,
        content_tree=content_tree,
        sync_orchestrator=sync_orchestrator,
        close_resources=close_resources,
    )
