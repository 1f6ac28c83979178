"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from slideshow.config import Settings
from slideshow.domain.models import Orientation, Photo, Slide
from slideshow.services.runner import PhotoSource, ResultSink


def horizontal(photo_id: int, *tags: str) -> Photo:
    return Photo(id=photo_id, orientation=Orientation.HORIZONTAL, tags=frozenset(tags))


def vertical(photo_id: int, *tags: str) -> Photo:
    return Photo(id=photo_id, orientation=Orientation.VERTICAL, tags=frozenset(tags))


def slide(*photo_ids: int, tags: Sequence[str] = ()) -> Slide:
    return Slide(photo_ids=photo_ids, tags=frozenset(tags))


@dataclass
class RecordingEmit:
    """Collects every group handed out by the matcher."""

    groups: list[tuple[object, ...]] = field(default_factory=list)

    def __call__(self, *group: object) -> None:
        self.groups.append(group)


@dataclass
class InMemoryPhotoSource(PhotoSource):
    """In-memory photo source keyed by file name."""

    photos: dict[str, list[Photo]] = field(default_factory=dict)
    reads: list[Path] = field(default_factory=list)

    def read(self, path: Path) -> list[Photo]:
        self.reads.append(path)
        if path.name not in self.photos:
            raise FileNotFoundError(path)
        return self.photos[path.name]


@dataclass
class InMemoryResultSink(ResultSink):
    """In-memory result sink that records written slideshows."""

    written: dict[Path, list[Slide]] = field(default_factory=dict)

    def write(self, path: Path, slides: Sequence[Slide]) -> None:
        self.written[path] = list(slides)


SAMPLE_INPUT = """4
H 3 cat beach sun
V 2 selfie smile
V 2 garden selfie
H 2 garden cat
"""


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        window_cap=5,
        input_dir=tmp_path / "in",
        output_dir=tmp_path / "out",
        datasets=["a_example"],
        executor="thread",
        max_workers=2,
    )


@pytest.fixture
def sample_input(settings: Settings) -> Path:
    settings.input_dir.mkdir(parents=True, exist_ok=True)
    path = settings.input_dir / "a_example.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path
