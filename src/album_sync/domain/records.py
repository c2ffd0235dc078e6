"""Raw remote records validated at the normalization boundary."""

from typing import Any

from pydantic import BaseModel, field_validator

_UNSAFE_SEGMENTS = {"", ".", ".."}


def is_safe_segment(segment: str) -> bool:
    """Return whether a name can be used as one local path component."""
    return (
        segment not in _UNSAFE_SEGMENTS
        and "\x00" not in segment
        and "\\" not in segment
    )


class RawFolder(BaseModel):
    """Folder entry from the remote folder listing."""

    name: str
    path: str

    @field_validator("path")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        if not all(is_safe_segment(segment) for segment in value.split("/")):
            raise ValueError(
                f"folder path must stay inside the content root: {value!r}"
            )
        return value


class FolderListing(BaseModel):
    """Envelope of the folder listing response."""

    folders: list[RawFolder]


class ResourceListing(BaseModel):
    """Envelope of the bulk image listing response."""

    resources: list[dict[str, Any]]


class RawPhotoRecord(BaseModel):
    """Image resource as returned by the media service."""

    public_id: str
    format: str
    version: int
    created_at: str
    width: int
    height: int
    tags: list[str] | None = None
    colors: list[tuple[str, int | float]] | None = None
