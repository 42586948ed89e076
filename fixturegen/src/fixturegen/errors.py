"""Per-entry failures raised by the fixture writer."""

from __future__ import annotations

from pathlib import Path


class FixtureError(Exception):
    kind = "fixture_error"

    def __init__(
        self,
        *,
        case_name: str,
        message: str,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.case_name = case_name
        self.message = message
        self.path = path

    def describe(self) -> str:
        return f"{self.case_name}: {self.kind} ({self.message})"


class CompressionFailure(FixtureError):
    """The codec could not compress the entry's input."""

    kind = "compression_failure"


class IOFailure(FixtureError):
    """The artifact could not be created or written."""

    kind = "io_failure"
