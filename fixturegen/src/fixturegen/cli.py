"""CLI interface for the codec test fixture generator."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from fixturegen.codecs import CODECS
from fixturegen.config import FixtureConfig
from fixturegen.logging import setup_logging
from fixturegen.runner import run_corpus
from fixturegen.verify import verify_corpus

_output_dir_option = click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Fixture directory (default: $FIXTUREGEN_OUTPUT_DIR or Tests/SnappySwiftTests/TestData).",
)
_codec_option = click.option(
    "--codec", "codec_name",
    type=click.Choice(list(CODECS.keys())),
    help="Codec to generate fixtures for (default: $FIXTUREGEN_CODEC or snappy).",
)


def _load_config(output_dir: Path | None, codec_name: str | None) -> FixtureConfig:
    try:
        config = FixtureConfig.from_env(output_dir=output_dir, codec_name=codec_name)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    setup_logging(config.log_format)
    return config


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context):
    """Codec test fixture generator. Runs `generate` when no command is given."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@main.command()
@_output_dir_option
@_codec_option
def generate(output_dir: Path | None, codec_name: str | None):
    """Compress every corpus entry and write its fixture."""
    config = _load_config(output_dir, codec_name)
    result = run_corpus(config)
    if not result.ok:
        sys.exit(1)


@main.command()
@_output_dir_option
@_codec_option
def verify(output_dir: Path | None, codec_name: str | None):
    """Check written fixtures decode back to their corpus inputs."""
    config = _load_config(output_dir, codec_name)
    summary = verify_corpus(config)

    for result in summary.results:
        status = "ok" if result.ok else f"FAILED ({result.problem})"
        click.echo(f"{result.case_name}: {status}")
    for path in summary.extraneous:
        click.echo(f"Extraneous file: {path}", err=True)

    click.echo(
        f"Verified {len(summary.results) - len(summary.failures)}/{len(summary.results)} fixtures."
    )
    if not summary.ok:
        sys.exit(1)


@main.command("list-cases")
def list_cases():
    """List corpus entries with their input sizes."""
    config = _load_config(None, None)
    for case in config.corpus:
        click.echo(f"{case.name}: {len(case.input)} bytes ({case.category})")
