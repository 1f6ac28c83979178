"""Plain-text result file writer."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from slideshow.domain.models import Slide
from slideshow.services.runner import ResultSink


def format_result(slides: Sequence[Slide]) -> str:
    """Render the slide count followed by one line of photo ids per slide."""
    lines = [str(len(slides)), *(slide.to_line() for slide in slides)]
    return "\n".join(lines) + "\n"


@dataclass
class ResultFileWriter(ResultSink):
    """Writes result files to disk."""

    encoding: str = "utf-8"

    def write(self, path: Path, slides: Sequence[Slide]) -> None:
        """Write the slideshow to ``path``, creating its directory if needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=self.encoding, newline="\n") as handle:
            handle.write(format_result(slides))
