"""The fixture corpus: named inputs that each exercise a distinct codec path."""

from __future__ import annotations

import re
from collections.abc import Iterable

from fixturegen.codecs import SnappyCodec
from fixturegen.models import TestCase

PANGRAM = b"The quick brown fox jumps over the lazy dog."

_SAFE_NAME = re.compile(r"^[A-Za-z0-9_.-]+$")


def _repeat_to_length(chunk: bytes, length: int) -> bytes:
    count = -(-length // len(chunk))
    return (chunk * count)[:length]


def large_input_size(block_size: int) -> int:
    """Size of the large uniform input: crosses at least two block boundaries."""
    return 2 * block_size + 10_000


def build_corpus(block_size: int = SnappyCodec.block_size) -> tuple[TestCase, ...]:
    """Build the ordered corpus, sizing the large inputs from the codec block size."""
    numbers = "".join(f"{i} " for i in range(100)).encode("ascii")
    large_text_size = max(100_000, block_size + 1)

    cases = (
        TestCase("empty", b"", "empty"),
        TestCase("single_byte", b"A", "minimal"),
        TestCase("hello", b"Hello, World!", "short_literal"),
        TestCase("repeated", b"a" * 100, "uniform_run"),
        TestCase("pattern", b"abcdefgh" * 20, "periodic_pattern"),
        TestCase("longer_text", b" ".join([PANGRAM] * 4), "repeated_phrase"),
        TestCase("ascii", bytes(range(32, 127)), "byte_diversity"),
        TestCase("large", b"x" * large_input_size(block_size), "large_block"),
        TestCase("mixed", b"AAAAAAAbbbbbCCCCCdddEEFF1234567890", "mixed_run"),
        TestCase("numbers", numbers, "structured_text"),
        TestCase("all_bytes", bytes(range(256)), "byte_diversity"),
        TestCase(
            "large_text",
            _repeat_to_length(PANGRAM + b" ", large_text_size),
            "large_block",
        ),
    )
    validate_corpus(cases)
    return cases


def is_safe_name(name: str) -> bool:
    return bool(_SAFE_NAME.match(name)) and name not in {".", ".."}


def validate_corpus(cases: Iterable[TestCase]) -> None:
    """Reject names that would collide or escape the output directory."""
    seen: set[str] = set()
    for case in cases:
        if not is_safe_name(case.name):
            raise ValueError(f"Corpus entry name is not filesystem-safe: {case.name!r}")
        if case.name in seen:
            raise ValueError(f"Duplicate corpus entry name: {case.name!r}")
        seen.add(case.name)


def get_case(name: str, corpus: Iterable[TestCase] | None = None) -> TestCase:
    for case in corpus if corpus is not None else DEFAULT_CORPUS:
        if case.name == name:
            return case
    raise KeyError(name)


DEFAULT_CORPUS: tuple[TestCase, ...] = build_corpus()
