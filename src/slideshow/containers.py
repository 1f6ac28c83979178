"""Dependency container wiring for the application."""

from dataclasses import dataclass

from slideshow.adapters.photo_reader import PhotoFileReader
from slideshow.adapters.result_writer import ResultFileWriter
from slideshow.config import Settings
from slideshow.services.matcher import WindowedGreedyMatcher
from slideshow.services.pipeline import SlideshowPipeline
from slideshow.services.runner import BatchRunner, DatasetProcessor
from slideshow.services.slides import SlideBuilder, SlideSequencer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    matcher: WindowedGreedyMatcher
    slide_builder: SlideBuilder
    slide_sequencer: SlideSequencer
    pipeline: SlideshowPipeline
    processor: DatasetProcessor
    runner: BatchRunner


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises ``ConfigurationError`` when the window cap is unusable, before any
    input is read.
    """
    resolved_settings = settings or Settings()
    matcher = WindowedGreedyMatcher(window_cap=resolved_settings.window_cap)
    slide_builder = SlideBuilder(matcher)
    slide_sequencer = SlideSequencer(matcher)
    pipeline = SlideshowPipeline(builder=slide_builder, sequencer=slide_sequencer)
    processor = DatasetProcessor(
        pipeline=pipeline,
        source=PhotoFileReader(),
        sink=ResultFileWriter(),
        input_dir=resolved_settings.input_dir,
        output_dir=resolved_settings.output_dir,
    )
    runner = BatchRunner(
        processor=processor,
        executor=resolved_settings.executor,
        max_workers=resolved_settings.max_workers,
    )
    return AppContainer(
        settings=resolved_settings,
        matcher=matcher,
        slide_builder=slide_builder,
        slide_sequencer=slide_sequencer,
        pipeline=pipeline,
        processor=processor,
        runner=runner,
    )
