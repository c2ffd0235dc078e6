"""Command-line entrypoint for a one-shot album sync."""

import asyncio

from album_sync.app_logging import configure_logging
from album_sync.containers import AppContainer, build_container
from album_sync.services.sync import SyncReport


async def run_sync(container: AppContainer) -> SyncReport:
    """Run the sync job and release the container's resources."""
    try:
        return await container.sync_orchestrator.run()
    finally:
        await container.close_resources()


def main(container: AppContainer | None = None) -> int:
    """Sync the content tree; return 0 on success and 1 on failure."""
    configure_logging()
    report = asyncio.run(run_sync(container or build_container()))
    return 0 if report.succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
