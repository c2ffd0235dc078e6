"""Photo catalog domain models."""

from dataclasses import dataclass

FEATURED_TAG = "featured"


@dataclass(frozen=True)
class Folder:
    """Album directory in the remote hierarchy and its local relative path."""

    name: str
    path: str


FEATURED_FOLDER = Folder(name=FEATURED_TAG, path=FEATURED_TAG)


@dataclass(frozen=True)
class Color:
    """Dominant color entry with its relative prevalence."""

    code: str
    weight: float


@dataclass(frozen=True)
class Photo:
    """Normalized photo record."""

    name: str
    album: str
    public_id: str
    format: str
    version: int
    created_at: str
    width: int
    height: int
    tags: tuple[str, ...] = ()
    colors: tuple[Color, ...] | None = None

    @property
    def is_featured(self) -> bool:
        """Return whether the photo belongs to the featured collection."""
        return FEATURED_TAG in self.tags

    def to_dict(self) -> dict[str, object]:
        """Return the JSON representation persisted to the content tree."""
        data: dict[str, object] = {
            "name": self.name,
            "album": self.album,
            "public_id": self.public_id,
            "format": self.format,
            "version": self.version,
            "created_at": self.created_at,
            "width": self.width,
            "height": self.height,
            "tags": list(self.tags),
        }
        if self.colors is not None:
            data["colors"] = [
                {"code": color.code, "weight": color.weight} for color in self.colors
            ]
        return data
