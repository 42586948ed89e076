"""Round-trip verification of written fixtures.

Reads each artifact back, decodes it with the codec and compares against the
corpus input. Also checks that re-encoding the input reproduces the artifact
byte for byte, and flags files in the output directory that no corpus entry
owns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from fixturegen.codecs import Codec
from fixturegen.config import FixtureConfig
from fixturegen.models import TestCase
from fixturegen.writer import artifact_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifyResult:
    case_name: str
    path: Path
    ok: bool
    problem: str | None = None


@dataclass
class VerifySummary:
    results: list[VerifyResult] = field(default_factory=list)
    extraneous: list[Path] = field(default_factory=list)

    @property
    def failures(self) -> list[VerifyResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failures and not self.extraneous


def verify_fixture(case: TestCase, *, output_dir: str | Path, codec: Codec) -> VerifyResult:
    path = artifact_path(output_dir, case.name, codec.extension)

    def fail(problem: str) -> VerifyResult:
        return VerifyResult(case_name=case.name, path=path, ok=False, problem=problem)

    try:
        artifact = path.read_bytes()
    except FileNotFoundError:
        return fail("artifact missing")
    except OSError as exc:
        return fail(f"cannot read artifact: {exc.strerror or exc}")

    try:
        decoded = codec.decompress(artifact)
    except Exception as exc:
        return fail(f"decode failed: {exc}")

    if decoded != case.input:
        return fail(
            f"round-trip mismatch: decoded {len(decoded)} bytes, expected {len(case.input)}"
        )
    try:
        reencoded = codec.compress(case.input)
    except Exception as exc:
        return fail(f"re-encode failed: {exc}")
    if reencoded != artifact:
        return fail("artifact differs from a fresh compression of the input")

    return VerifyResult(case_name=case.name, path=path, ok=True)


def find_extraneous(
    output_dir: str | Path,
    corpus: Iterable[TestCase],
    extension: str,
) -> list[Path]:
    """Files in output_dir that are not the artifact of any corpus entry."""
    directory = Path(output_dir)
    if not directory.is_dir():
        return []
    expected = {artifact_path(directory, case.name, extension).name for case in corpus}
    return sorted(p for p in directory.iterdir() if p.name not in expected)


def verify_corpus(config: FixtureConfig) -> VerifySummary:
    summary = VerifySummary()
    for case in config.corpus:
        result = verify_fixture(case, output_dir=config.output_dir, codec=config.codec)
        if not result.ok:
            logger.warning(
                "Fixture %s failed verification: %s",
                case.name,
                result.problem,
                extra={"fixturegen_case": case.name, "fixturegen_path": str(result.path)},
            )
        summary.results.append(result)
    summary.extraneous = find_extraneous(config.output_dir, config.corpus, config.codec.extension)
    return summary
