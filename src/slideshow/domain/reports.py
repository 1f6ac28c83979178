"""Models describing the outcome of a batch run."""

from typing import Literal

from pydantic import BaseModel, Field


class DatasetReport(BaseModel):
    """Outcome of processing a single input file."""

    name: str
    status: Literal["ok", "failed"]
    photo_count: int = Field(default=0, ge=0)
    slide_count: int = Field(default=0, ge=0)
    interest: int | None = Field(default=None, ge=0)
    output_path: str | None = None
    error: str | None = None

    def summary(self) -> str:
        """Return a one-line human readable summary."""
        if self.status == "failed":
            return f"{self.name}: FAILED ({self.error})"
        return (
            f"{self.name}: {self.slide_count} slides from {self.photo_count} photos, "
            f"interest={self.interest} -> {self.output_path}"
        )


class BatchReport(BaseModel):
    """Outcomes for every file in a run, in the requested order."""

    reports: list[DatasetReport]

    @property
    def failed(self) -> list[DatasetReport]:
        """Reports of files that did not produce output."""
        return [report for report in self.reports if report.status == "failed"]
