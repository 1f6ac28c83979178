"""Domain models for photos and slides."""

from dataclasses import dataclass
from enum import Enum


class Orientation(Enum):
    """Photo orientation."""

    HORIZONTAL = "H"
    VERTICAL = "V"


@dataclass(frozen=True)
class Photo:
    """A tagged photo read from an input file."""

    id: int
    orientation: Orientation
    tags: frozenset[str]

    def to_slide(self) -> "Slide":
        """Return a single-photo slide for this photo."""
        return Slide(photo_ids=(self.id,), tags=self.tags)


@dataclass(frozen=True)
class Slide:
    """One or two photos shown together.

    ``photo_ids`` keeps the order in which the photos were combined, which is
    also the order they are written out in.
    """

    photo_ids: tuple[int, ...]
    tags: frozenset[str]

    def __post_init__(self) -> None:
        if len(self.photo_ids) not in {1, 2}:
            raise ValueError(
                f"A slide holds one or two photos, got {len(self.photo_ids)}"
            )
        if len(set(self.photo_ids)) != len(self.photo_ids):
            raise ValueError(f"Duplicate photo ids in slide: {self.photo_ids}")

    @classmethod
    def from_photos(cls, *photos: Photo) -> "Slide":
        """Combine one or two photos into a slide with the union of their tags."""
        tags: frozenset[str] = frozenset()
        for photo in photos:
            tags |= photo.tags
        return cls(photo_ids=tuple(photo.id for photo in photos), tags=tags)

    def to_line(self) -> str:
        """Render the slide as a result file line."""
        return " ".join(str(photo_id) for photo_id in self.photo_ids)
