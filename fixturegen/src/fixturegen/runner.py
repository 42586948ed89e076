"""Driving loop: write every corpus entry and collect per-entry outcomes.

A failing entry is reported by name and skipped; the rest of the corpus is
still written, and the failures are listed again after the completion line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from fixturegen.config import FixtureConfig
from fixturegen.errors import FixtureError
from fixturegen.models import FixtureOutcome, RunResult
from fixturegen.writer import write_fixture

logger = logging.getLogger(__name__)

Echo = Callable[..., None]


def run_corpus(config: FixtureConfig, echo: Echo = click.echo) -> RunResult:
    """Write one artifact per corpus entry, in corpus order."""
    echo(f"Generating {config.codec.display_name} test data...")
    echo()
    logger.info(
        "Writing %d fixtures to %s",
        len(config.corpus),
        config.output_dir,
        extra={"fixturegen_codec": config.codec.name},
    )

    outcomes: list[FixtureOutcome] = []
    for case in config.corpus:
        try:
            report = write_fixture(case, output_dir=config.output_dir, codec=config.codec)
        except FixtureError as exc:
            logger.debug(
                "Fixture %s failed",
                case.name,
                exc_info=exc,
                extra={"fixturegen_case": case.name, "fixturegen_error": exc.kind},
            )
            echo(f"{case.name}: FAILED ({exc.kind}: {exc.message})", err=True)
            echo()
            outcomes.append(FixtureOutcome(case_name=case.name, error=exc))
            continue

        for line in report.lines():
            echo(line)
        echo()
        outcomes.append(FixtureOutcome(case_name=case.name, report=report))

    result = RunResult(outcomes=outcomes)
    echo("Test data generation complete!")

    failures = result.failures
    if failures:
        echo(f"{len(failures)} of {len(outcomes)} fixtures failed:", err=True)
        for err in failures:
            echo(f"  {err.describe()}", err=True)
    return result
