"""End-to-end slideshow assembly for one set of photos."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from slideshow.domain.models import Orientation, Photo, Slide
from slideshow.services.slides import SlideBuilder, SlideSequencer

_logger = logging.getLogger(__name__)


def partition_by_orientation(
    photos: Iterable[Photo],
) -> tuple[list[Photo], list[Photo]]:
    """Split photos into horizontal and vertical lists, keeping input order."""
    horizontal: list[Photo] = []
    vertical: list[Photo] = []
    for photo in photos:
        if photo.orientation is Orientation.HORIZONTAL:
            horizontal.append(photo)
        else:
            vertical.append(photo)
    return horizontal, vertical


@dataclass
class SlideshowPipeline:
    """Builds slides and orders each orientation group independently."""

    builder: SlideBuilder
    sequencer: SlideSequencer

    def run(self, photos: Iterable[Photo]) -> list[Slide]:
        """Return the ordered slideshow: horizontal block, then vertical block."""
        horizontal, vertical = partition_by_orientation(photos)
        built = self.builder.build(horizontal, vertical)
        _logger.debug(
            "Built %s horizontal and %s vertical slides",
            len(built.horizontal),
            len(built.vertical),
        )
        ordered_horizontal = self.sequencer.sequence(built.horizontal)
        ordered_vertical = self.sequencer.sequence(built.vertical)
        return ordered_horizontal + ordered_vertical
