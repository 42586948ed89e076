"""Core data models for fixture generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fixturegen.errors import FixtureError


@dataclass(frozen=True)
class TestCase:
    """One named corpus entry; its name is the artifact filename stem."""

    __test__ = False  # not a pytest class

    name: str
    input: bytes
    category: str = ""


@dataclass(frozen=True)
class Report:
    """Diagnostic statistics for one written artifact."""

    name: str
    input_size: int
    compressed_size: int
    path: Path

    @property
    def ratio(self) -> float | None:
        """input_size / compressed_size, or None when nothing was written."""
        if self.compressed_size == 0:
            return None
        return self.input_size / self.compressed_size

    def format_ratio(self) -> str:
        ratio = self.ratio
        if ratio is None:
            return "N/A"
        return f"{ratio:.2f}x"

    def lines(self) -> list[str]:
        return [
            f"{self.name}:",
            f"  Input size: {self.input_size} bytes",
            f"  Compressed size: {self.compressed_size} bytes",
            f"  Ratio: {self.format_ratio()}",
            f"  Saved to: {self.path}",
        ]


@dataclass(frozen=True)
class FixtureOutcome:
    """Result of one write_fixture call: exactly one of report / error is set."""

    case_name: str
    report: Report | None = None
    error: FixtureError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Per-entry outcomes of a full corpus pass, in corpus order."""

    outcomes: list[FixtureOutcome]

    @property
    def reports(self) -> list[Report]:
        return [o.report for o in self.outcomes if o.report is not None]

    @property
    def failures(self) -> list[FixtureError]:
        return [o.error for o in self.outcomes if o.error is not None]

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)
