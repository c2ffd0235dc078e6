"""Local JSON content tree for synced albums."""

import asyncio
import json
import shutil
from collections.abc import Awaitable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from album_sync.domain.errors import DetailWriteError, StorageSetupError
from album_sync.domain.photos import FEATURED_FOLDER, Folder, Photo

INDEX_FILENAME = "index.json"


@dataclass
class FilesystemContentTree:
    """Content tree rooted at a local directory."""

    root: Path

    async def reset_root(self) -> None:
        """Remove the root directory if present and recreate it empty."""
        try:
            await asyncio.to_thread(self._reset_root)
        except (OSError, ValueError) as exc:
            raise StorageSetupError(f"Failed to reset {self.root}: {exc}") from exc

    async def create_album_directories(self, folders: Sequence[Folder]) -> None:
        """Create one directory per album plus the featured collection."""
        await _join_all(
            self._make_album_dir(folder) for folder in [*folders, FEATURED_FOLDER]
        )

    async def write_album_indices(
        self, folders: Sequence[Folder], photos: Sequence[Photo]
    ) -> None:
        """Write an index file for every album and the featured collection."""
        writes = [
            self._write_index(
                folder, [photo for photo in photos if photo.album == folder.name]
            )
            for folder in folders
        ]
        writes.append(
            self._write_index(
                FEATURED_FOLDER, [photo for photo in photos if photo.is_featured]
            )
        )
        await _join_all(writes)

    async def write_photo_detail(self, photo: Photo) -> None:
        """Write a photo under its album and, if featured, the featured collection."""
        content = _dumps(photo.to_dict())
        targets = [self.root / photo.album / f"{photo.name}.json"]
        if photo.is_featured:
            targets.append(self.root / FEATURED_FOLDER.path / f"{photo.name}.json")
        try:
            for target in targets:
                await asyncio.to_thread(target.write_text, content, encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise DetailWriteError(photo.public_id, str(exc)) from exc

    async def _write_index(self, folder: Folder, photos: list[Photo]) -> None:
        content = _dumps(
            {"name": folder.name, "photos": [photo.to_dict() for photo in photos]}
        )
        target = self._album_dir(folder) / INDEX_FILENAME
        await asyncio.to_thread(target.write_text, content, encoding="utf-8")

    async def _make_album_dir(self, folder: Folder) -> None:
        await asyncio.to_thread(self._album_dir(folder).mkdir)

    def _album_dir(self, folder: Folder) -> Path:
        path = self.root / folder.path
        if not path.resolve().is_relative_to(self.root.resolve()):
            raise StorageSetupError(
                f"Album path escapes {self.root}: {folder.path!r}"
            )
        return path

    def _reset_root(self) -> None:
        if self.root.exists():
            shutil.rmtree(self.root)
        self.root.mkdir(parents=True)


async def _join_all(operations: Iterable[Awaitable[object]]) -> None:
    """Run operations concurrently and raise the first failure once all settle."""
    results = await asyncio.gather(*operations, return_exceptions=True)
    for result in results:
        if isinstance(result, StorageSetupError):
            raise result
        if isinstance(result, Exception):
            raise StorageSetupError(str(result)) from result
        if isinstance(result, BaseException):
            raise result


def _dumps(data: object) -> str:
    """Serialize compactly so identical catalogs produce identical files."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
