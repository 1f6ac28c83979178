"""Pairwise scores for photos and slides."""

from collections.abc import Sequence

from slideshow.domain.models import Photo, Slide


def photo_score(a: Photo, b: Photo) -> int:
    """Score two vertical photos by the size of their merged tag vocabulary."""
    return len(a.tags | b.tags)


def slide_score(a: Slide, b: Slide) -> int:
    """Score two slides as neighbours.

    This is ``min(|union|, |intersection|)``, which differs from
    :func:`interest_factor`. Matching relies on this exact value.
    """
    return min(len(a.tags | b.tags), len(a.tags & b.tags))


def interest_factor(a: Slide, b: Slide) -> int:
    """Return the interest of the transition from ``a`` to ``b``."""
    common = len(a.tags & b.tags)
    return min(common, len(a.tags) - common, len(b.tags) - common)


def total_interest(slides: Sequence[Slide]) -> int:
    """Sum the interest of every consecutive pair of slides."""
    return sum(
        interest_factor(current, following)
        for current, following in zip(slides, slides[1:], strict=False)
    )
