"""
Compression adapter for backup streams.

Wraps an output sink with a gzip compressor, or an input source with a gzip
decompressor. When compression is off the wrapper passes bytes through.

Wrappers never close the underlying stream. The gzip writer buffers data and
only writes its trailer on close, so it must be closed before the artifact is
closed or measured.
"""

import gzip
import logging
from typing import BinaryIO, Union

logger = logging.getLogger(__name__)

COMPRESSION_SUFFIX = ".gz"


class PassThroughStream:
    """File-like wrapper that forwards reads and writes without owning the stream."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.closed = False

    def write(self, data: bytes) -> int:
        return self._stream.write(data)

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "PassThroughStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


Stream = Union[gzip.GzipFile, PassThroughStream]


def is_compressed(path: str) -> bool:
    """Whether an artifact name carries the compression suffix."""
    return path.endswith(COMPRESSION_SUFFIX)


def open_compressed_writer(sink: BinaryIO, compress: bool) -> Stream:
    """
    Wrap an output sink.

    Args:
        sink: Binary stream the artifact bytes end up in
        compress: Whether to gzip the data

    Returns:
        Writer to hand to the connector; close it before closing ``sink``
    """
    if compress:
        return gzip.GzipFile(fileobj=sink, mode="wb")
    return PassThroughStream(sink)


def open_decompressed_reader(source: BinaryIO, name: str) -> Stream:
    """
    Wrap an input source, decompressing if ``name`` has the gzip suffix.

    Args:
        source: Binary stream of the artifact
        name: Artifact file name, used to detect compression

    Returns:
        Reader yielding the uncompressed dump
    """
    if is_compressed(name):
        logger.debug(f"Decompressing {name}")
        return gzip.GzipFile(fileobj=source, mode="rb")
    return PassThroughStream(source)
