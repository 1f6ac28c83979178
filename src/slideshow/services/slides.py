"""Building slides from photos and ordering them."""

from collections.abc import Sequence
from dataclasses import dataclass

from slideshow.domain.models import Photo, Slide
from slideshow.domain.scoring import photo_score, slide_score
from slideshow.services.matcher import WindowedGreedyMatcher


@dataclass(frozen=True)
class BuiltSlides:
    """Slides grouped by the orientation of the photos they came from."""

    horizontal: list[Slide]
    vertical: list[Slide]


@dataclass
class SlideBuilder:
    """Turns horizontal photos into slides and pairs vertical photos."""

    matcher: WindowedGreedyMatcher

    def build(
        self, horizontal: Sequence[Photo], vertical: Sequence[Photo]
    ) -> BuiltSlides:
        """Return one slide per horizontal photo and paired vertical slides."""
        horizontal_slides = [photo.to_slide() for photo in horizontal]
        vertical_slides: list[Slide] = []

        def merge(*photos: Photo) -> None:
            vertical_slides.append(Slide.from_photos(*photos))

        self.matcher.run(vertical, photo_score, merge)
        return BuiltSlides(horizontal=horizontal_slides, vertical=vertical_slides)


@dataclass
class SlideSequencer:
    """Reorders slides so that well-matched slides end up adjacent."""

    matcher: WindowedGreedyMatcher

    def sequence(self, slides: Sequence[Slide]) -> list[Slide]:
        """Return a permutation of ``slides``."""
        ordered: list[Slide] = []

        def append(*group: Slide) -> None:
            ordered.extend(group)

        self.matcher.run(slides, slide_score, append)
        return ordered
