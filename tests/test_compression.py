"""Tests for the compression adapter."""

from __future__ import annotations

import gzip
import io

from masstdb.services import is_compressed, open_compressed_writer, open_decompressed_reader


def test_compressed_writer_produces_gzip_only_after_close() -> None:
    sink = io.BytesIO()
    writer = open_compressed_writer(sink, compress=True)
    writer.write(b'CREATE TABLE t (id INTEGER);\n' * 100)
    writer.close()

    assert not sink.closed
    assert gzip.decompress(sink.getvalue()) == b'CREATE TABLE t (id INTEGER);\n' * 100


def test_uncompressed_writer_passes_bytes_through() -> None:
    sink = io.BytesIO()
    with open_compressed_writer(sink, compress=False) as writer:
        writer.write(b'raw')

    assert sink.getvalue() == b'raw'
    assert not sink.closed


def test_reader_decompresses_by_suffix() -> None:
    payload = gzip.compress(b'INSERT INTO t VALUES (1);')

    with open_decompressed_reader(io.BytesIO(payload), 'backup.sql.gz') as reader:
        assert reader.read() == b'INSERT INTO t VALUES (1);'

    with open_decompressed_reader(io.BytesIO(payload), 'backup.sql') as reader:
        assert reader.read() == payload


def test_is_compressed() -> None:
    assert is_compressed('/tmp/out.sql.gz')
    assert not is_compressed('/tmp/out.sql')
    assert not is_compressed('/tmp/out.gzip')
