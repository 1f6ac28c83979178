"""Plain-text photo file reader."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from slideshow.domain.models import Orientation, Photo
from slideshow.errors import ParseError
from slideshow.services.runner import PhotoSource

_logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split file text on newlines only, tolerating CRLF and a final newline."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_photos(lines: Sequence[str]) -> list[Photo]:
    """Parse the header line and one photo per following line.

    Photo ids are zero-based positions among the photo lines. Any orientation
    other than ``H`` is read as vertical.
    """
    if not lines:
        raise ParseError("missing photo count line", line_number=1)
    declared = lines[0].strip()

    photos = [
        _parse_photo_line(line, photo_id=index, line_number=index + 2)
        for index, line in enumerate(lines[1:])
    ]
    if not declared.isdigit() or int(declared) != len(photos):
        _logger.warning(
            "Photo count header %r does not match %s photo lines",
            declared,
            len(photos),
        )
    return photos


def _parse_photo_line(line: str, photo_id: int, line_number: int) -> Photo:
    tokens = [token for token in line.split(" ") if token]
    if not tokens:
        raise ParseError("missing orientation field", line_number=line_number)
    if len(tokens) < 2:  # noqa: PLR2004
        raise ParseError("missing tag count field", line_number=line_number)
    try:
        tag_count = int(tokens[1])
    except ValueError as exc:
        raise ParseError(
            f"tag count {tokens[1]!r} is not an integer", line_number=line_number
        ) from exc
    tags = tokens[2:]
    if len(tags) < tag_count:
        raise ParseError(
            f"expected {tag_count} tags, found {len(tags)}", line_number=line_number
        )
    orientation = (
        Orientation.HORIZONTAL
        if tokens[0] == Orientation.HORIZONTAL.value
        else Orientation.VERTICAL
    )
    return Photo(id=photo_id, orientation=orientation, tags=frozenset(tags))


@dataclass
class PhotoFileReader(PhotoSource):
    """Reads photos from a text file on disk."""

    encoding: str = "utf-8"

    def read(self, path: Path) -> list[Photo]:
        """Read and parse a photo file."""
        try:
            text = path.read_bytes().decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise ParseError(
                f"{path} is not valid {self.encoding} text: {exc.reason}"
            ) from exc
        return parse_photos(split_lines(text))
