"""Fixture writer: compress one corpus entry and persist the raw bytes.

Artifacts carry no framing, metadata or checksum. Consumers read
<output_dir>/<name>.<ext> and expect the codec's exact output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fixturegen.codecs import Codec
from fixturegen.errors import CompressionFailure, IOFailure
from fixturegen.models import Report, TestCase

logger = logging.getLogger(__name__)


def artifact_path(output_dir: str | Path, name: str, extension: str) -> Path:
    return Path(output_dir) / f"{name}.{extension}"


def write_fixture(case: TestCase, *, output_dir: str | Path, codec: Codec) -> Report:
    """Compress case.input and write it to its artifact, truncating any old file.

    Raises CompressionFailure if the codec rejects the input and IOFailure if
    the artifact cannot be opened or written.
    """
    try:
        compressed = codec.compress(case.input)
    except Exception as exc:
        raise CompressionFailure(
            case_name=case.name,
            message=f"{codec.name} compress failed: {exc}",
        ) from exc

    path = artifact_path(output_dir, case.name, codec.extension)
    try:
        with path.open("wb") as f:
            f.write(compressed)
    except OSError as exc:
        raise IOFailure(
            case_name=case.name,
            message=f"cannot write {path}: {exc.strerror or exc}",
            path=path,
        ) from exc

    logger.debug(
        "Wrote %s (%d -> %d bytes)",
        path,
        len(case.input),
        len(compressed),
        extra={"fixturegen_case": case.name, "fixturegen_path": str(path)},
    )
    return Report(
        name=case.name,
        input_size=len(case.input),
        compressed_size=len(compressed),
        path=path,
    )
