from __future__ import annotations

import logging

import pytest


class StubCodec:
    """Identity-ish codec that can be told to fail on specific inputs."""

    name = "stub"
    display_name = "Stub"
    extension = "bin"
    block_size = 16

    def __init__(self, fail_on: tuple[bytes, ...] = (), output: bytes | None = None):
        self.fail_on = fail_on
        self.output = output

    def compress(self, data: bytes) -> bytes:
        if data in self.fail_on:
            raise RuntimeError("stub codec refused input")
        if self.output is not None:
            return self.output
        return b"S" + data

    def decompress(self, data: bytes) -> bytes:
        if not data.startswith(b"S"):
            raise ValueError("not a stub stream")
        return data[1:]


@pytest.fixture
def stub_codec():
    return StubCodec


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
