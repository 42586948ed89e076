"""Integration tests for the corpus driving loop."""

import logging
from pathlib import Path

import pytest

from fixturegen.codecs import SnappyCodec
from fixturegen.config import FixtureConfig
from fixturegen.corpus import DEFAULT_CORPUS
from fixturegen.errors import CompressionFailure, IOFailure
from fixturegen.models import TestCase
from fixturegen.runner import run_corpus


class Capture:
    def __init__(self):
        self.out: list[str] = []
        self.err: list[str] = []

    def __call__(self, message: str = "", err: bool = False) -> None:
        (self.err if err else self.out).append(message)


def _snappy_config(output_dir: Path) -> FixtureConfig:
    return FixtureConfig(output_dir=output_dir, codec=SnappyCodec())


class TestEndToEnd:
    def test_one_artifact_per_entry(self, tmp_path):
        result = run_corpus(_snappy_config(tmp_path), echo=Capture())
        assert result.ok
        written = sorted(p.name for p in tmp_path.iterdir())
        assert written == sorted(f"{c.name}.snappy" for c in DEFAULT_CORPUS)

    def test_report_count_matches_corpus(self, tmp_path):
        echo = Capture()
        result = run_corpus(_snappy_config(tmp_path), echo=echo)
        assert len(result.reports) == len(DEFAULT_CORPUS)
        assert sum(1 for line in echo.out if line.startswith("  Saved to: ")) == len(DEFAULT_CORPUS)

    def test_banner_and_completion(self, tmp_path):
        echo = Capture()
        run_corpus(_snappy_config(tmp_path), echo=echo)
        assert echo.out[0] == "Generating Snappy test data..."
        assert echo.out[-1] == "Test data generation complete!"
        assert echo.err == []

    def test_reports_follow_corpus_order(self, tmp_path):
        result = run_corpus(_snappy_config(tmp_path), echo=Capture())
        assert [r.name for r in result.reports] == [c.name for c in DEFAULT_CORPUS]

    def test_rerun_is_byte_identical(self, tmp_path):
        config = _snappy_config(tmp_path)
        run_corpus(config, echo=Capture())
        first = {p.name: p.read_bytes() for p in tmp_path.iterdir()}
        run_corpus(config, echo=Capture())
        second = {p.name: p.read_bytes() for p in tmp_path.iterdir()}
        assert first == second


@pytest.mark.parametrize("case", DEFAULT_CORPUS, ids=lambda c: c.name)
def test_round_trip_every_entry(tmp_path, case):
    codec = SnappyCodec()
    run_corpus(FixtureConfig(output_dir=tmp_path, codec=codec, corpus=(case,)), echo=Capture())
    artifact = (tmp_path / f"{case.name}.snappy").read_bytes()
    assert codec.decompress(artifact) == case.input


class TestFailures:
    def test_compression_failure_does_not_stop_run(self, tmp_path, stub_codec):
        corpus = (
            TestCase("first", b"one"),
            TestCase("broken", b"boom"),
            TestCase("last", b"three"),
        )
        config = FixtureConfig(
            output_dir=tmp_path,
            codec=stub_codec(fail_on=(b"boom",)),
            corpus=corpus,
        )
        echo = Capture()
        result = run_corpus(config, echo=echo)

        assert not result.ok
        assert [r.name for r in result.reports] == ["first", "last"]
        assert len(result.failures) == 1
        assert isinstance(result.failures[0], CompressionFailure)
        assert (tmp_path / "first.bin").exists()
        assert (tmp_path / "last.bin").exists()
        assert not (tmp_path / "broken.bin").exists()

        assert any(line.startswith("broken: FAILED (compression_failure") for line in echo.err)
        assert "1 of 3 fixtures failed:" in echo.err
        assert echo.err[-1].startswith("  broken: compression_failure")
        assert echo.out[-1] == "Test data generation complete!"

    def test_missing_directory_fails_every_entry(self, tmp_path):
        config = _snappy_config(tmp_path / "missing")
        echo = Capture()
        result = run_corpus(config, echo=echo)

        assert len(result.failures) == len(DEFAULT_CORPUS)
        assert all(isinstance(e, IOFailure) for e in result.failures)
        assert f"{len(DEFAULT_CORPUS)} of {len(DEFAULT_CORPUS)} fixtures failed:" in echo.err
        failed_names = [e.case_name for e in result.failures]
        assert failed_names == [c.name for c in DEFAULT_CORPUS]


def test_banner_uses_codec_display_name(tmp_path, stub_codec):
    echo = Capture()
    run_corpus(
        FixtureConfig(output_dir=tmp_path, codec=stub_codec(), corpus=(TestCase("a", b"1"),)),
        echo=echo,
    )
    assert echo.out[0] == "Generating Stub test data..."


class TestFailureLogging:
    def test_no_traceback_above_debug(self, tmp_path, caplog):
        caplog.set_level(logging.INFO, logger="fixturegen")
        run_corpus(_snappy_config(tmp_path / "missing"), echo=Capture())
        assert not [r for r in caplog.records if r.exc_info]

    def test_traceback_kept_at_debug(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG, logger="fixturegen")
        run_corpus(_snappy_config(tmp_path / "missing"), echo=Capture())
        failed = [r for r in caplog.records if r.exc_info]
        assert len(failed) == len(DEFAULT_CORPUS)
        assert all(r.levelno == logging.DEBUG for r in failed)
        assert failed[0].fixturegen_error == "io_failure"
