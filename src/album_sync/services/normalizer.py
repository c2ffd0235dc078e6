"""Normalization of raw media records into domain photos."""

from collections.abc import Mapping

from pydantic import ValidationError

from album_sync.domain.errors import MalformedRecordError
from album_sync.domain.photos import Color, Photo
from album_sync.domain.records import RawPhotoRecord, is_safe_segment

_SEPARATOR = "/"
_ID_SEGMENTS = 2


def split_public_id(public_id: str) -> tuple[str, str]:
    """Split a composite ``<album>/<name>`` identifier into its parts."""
    parts = public_id.split(_SEPARATOR)
    if len(parts) != _ID_SEGMENTS or not all(map(is_safe_segment, parts)):
        raise MalformedRecordError(
            f"Expected '<album>/<name>' public id, got {public_id!r}"
        )
    return parts[0], parts[1]


def normalize(raw: RawPhotoRecord | Mapping[str, object]) -> Photo:
    """Build a Photo from a raw image resource."""
    if not isinstance(raw, RawPhotoRecord):
        try:
            raw = RawPhotoRecord.model_validate(raw)
        except ValidationError as exc:
            raise MalformedRecordError(f"Invalid image record: {exc}") from exc

    album, name = split_public_id(raw.public_id)
    colors = None
    if raw.colors is not None:
        colors = tuple(Color(code=code, weight=weight) for code, weight in raw.colors)

    return Photo(
        name=name,
        album=album,
        public_id=raw.public_id,
        format=raw.format,
        version=raw.version,
        created_at=raw.created_at,
        width=raw.width,
        height=raw.height,
        tags=tuple(raw.tags or ()),
        colors=colors,
    )
