"""Error types raised by the slideshow builder."""


class SlideshowError(Exception):
    """Base class for slideshow failures."""


class ParseError(SlideshowError):
    """Raised when an input file does not follow the photo grammar."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message, line_number)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class ConfigurationError(SlideshowError):
    """Raised when settings cannot drive a run."""
