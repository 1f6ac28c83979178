"""Per-file processing and parallel dispatch of independent files."""

import logging
from collections.abc import Sequence
from concurrent.futures import (
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

from slideshow.app_logging import configure_logging
from slideshow.datasets import input_filename, result_filename
from slideshow.domain.models import Photo, Slide
from slideshow.domain.reports import BatchReport, DatasetReport
from slideshow.domain.scoring import total_interest
from slideshow.errors import ParseError
from slideshow.services.pipeline import SlideshowPipeline

_logger = logging.getLogger(__name__)


class PhotoSource(Protocol):
    """Interface for loading the photos of one input file."""

    def read(self, path: Path) -> list[Photo]:
        """Return the photos stored at ``path``."""


class ResultSink(Protocol):
    """Interface for storing an ordered slideshow."""

    def write(self, path: Path, slides: Sequence[Slide]) -> None:
        """Store ``slides`` at ``path``."""


@dataclass
class DatasetProcessor:
    """Runs read, assemble and write for a single dataset."""

    pipeline: SlideshowPipeline
    source: PhotoSource
    sink: ResultSink
    input_dir: Path
    output_dir: Path

    def process(self, name: str) -> DatasetReport:
        """Process one dataset and return its report.

        Raises ``ParseError`` or ``OSError`` when the input cannot be used; no
        output file is written in that case.
        """
        input_path = self.input_dir / input_filename(name)
        output_path = self.output_dir / result_filename(name)
        _logger.info("Processing %s from %s", name, input_path)

        photos = self.source.read(input_path)
        slides = self.pipeline.run(photos)
        self.sink.write(output_path, slides)

        report = DatasetReport(
            name=name,
            status="ok",
            photo_count=len(photos),
            slide_count=len(slides),
            interest=total_interest(slides),
            output_path=str(output_path),
        )
        _logger.info(
            "Finished %s: %s photos, %s slides, interest=%s",
            name,
            report.photo_count,
            report.slide_count,
            report.interest,
        )
        return report


@dataclass
class BatchRunner:
    """Dispatches one task per dataset onto a worker pool."""

    processor: DatasetProcessor
    executor: Literal["process", "thread"] = "process"
    max_workers: int | None = None

    def run(self, names: Sequence[str]) -> BatchReport:
        """Process every dataset; a failing file never stops the others."""
        unique_names = list(dict.fromkeys(names))
        reports: dict[str, DatasetReport] = {}
        with self._create_executor() as pool:
            future_to_name: dict[Future[DatasetReport], str] = {
                pool.submit(self.processor.process, name): name
                for name in unique_names
            }
            for future in as_completed(future_to_name):
                name = future_to_name[future]
                try:
                    reports[name] = future.result()
                except (ParseError, OSError) as exc:
                    _logger.error("Dataset %s failed: %s", name, exc)
                    reports[name] = DatasetReport(
                        name=name, status="failed", error=str(exc)
                    )
        return BatchReport(reports=[reports[name] for name in unique_names])

    def _create_executor(self) -> Executor:
        if self.executor == "thread":
            return ThreadPoolExecutor(max_workers=self.max_workers)
        return ProcessPoolExecutor(
            max_workers=self.max_workers, initializer=configure_logging
        )
