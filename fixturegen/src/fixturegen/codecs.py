"""Codec adapters wrapping the external compression primitive.

The generator never implements compression itself. A codec only has to expose
a name, the artifact file extension, its internal block size (used to size
the large corpus inputs) and a deterministic compress/decompress pair.
"""

from __future__ import annotations

from typing import Protocol

import snappy


class Codec(Protocol):
    name: str
    display_name: str
    extension: str
    block_size: int

    def compress(self, data: bytes) -> bytes: ...

    def decompress(self, data: bytes) -> bytes: ...


class SnappyCodec:
    """Raw (unframed) Snappy via python-snappy."""

    name = "snappy"
    display_name = "Snappy"
    extension = "snappy"
    # Snappy compresses its input in independent 64 KiB blocks (kBlockSize).
    block_size = 1 << 16

    def compress(self, data: bytes) -> bytes:
        return bytes(snappy.compress(data))

    def decompress(self, data: bytes) -> bytes:
        return bytes(snappy.decompress(data))


CODECS: dict[str, Codec] = {
    "snappy": SnappyCodec(),
}


def get_codec(name: str) -> Codec:
    try:
        return CODECS[name]
    except KeyError:
        raise ValueError(
            f"Unknown codec {name!r} (available: {', '.join(sorted(CODECS))})"
        ) from None
