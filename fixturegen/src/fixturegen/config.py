from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from fixturegen.codecs import Codec, get_codec
from fixturegen.corpus import build_corpus, validate_corpus
from fixturegen.logging import LOG_FORMATS
from fixturegen.models import TestCase

DEFAULT_OUTPUT_DIR = Path("Tests/SnappySwiftTests/TestData")
DEFAULT_CODEC = "snappy"


@dataclass(frozen=True)
class FixtureConfig:
    output_dir: Path
    codec: Codec
    corpus: tuple[TestCase, ...] | None = None
    log_format: str = "text"

    def __post_init__(self) -> None:
        if self.corpus is None:
            object.__setattr__(self, "corpus", build_corpus(self.codec.block_size))
        else:
            object.__setattr__(self, "corpus", tuple(self.corpus))
        validate_corpus(self.corpus)
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

    @classmethod
    def from_env(
        cls,
        *,
        output_dir: Path | None = None,
        codec_name: str | None = None,
    ) -> "FixtureConfig":
        """Build config from FIXTUREGEN_* env vars; explicit arguments win."""
        if output_dir is None:
            output_dir = Path(os.environ.get("FIXTUREGEN_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR)))
        if codec_name is None:
            codec_name = os.environ.get("FIXTUREGEN_CODEC", DEFAULT_CODEC)

        return cls(
            output_dir=output_dir,
            codec=get_codec(codec_name),
            log_format=os.environ.get("FIXTUREGEN_LOG_FORMAT", "text"),
        )
