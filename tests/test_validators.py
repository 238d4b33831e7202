"""Tests for connection spec validation and engine descriptors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from masstdb.exceptions import ConfigurationError
from masstdb.models import ConnectionSpec, EngineType, default_port, get_engine_descriptor
from masstdb.utils import validate_connection_spec


@pytest.mark.parametrize('engine', ['postgres', 'mysql', 'mongodb', 'sqlite'])
def test_valid_spec_passes_for_every_engine(engine: str) -> None:
    validate_connection_spec(ConnectionSpec(type=engine, host='localhost', database='app'))


@pytest.mark.parametrize(
    ('spec', 'message'),
    [
        (ConnectionSpec(type='', database='x'), 'database type is required'),
        (ConnectionSpec(type='oracle', host='h', database='x'), 'unsupported database type: oracle'),
        (ConnectionSpec(type='postgres', host='h', database=''), 'database name is required'),
        (ConnectionSpec(type='postgres', database='x', host=''), 'host is required for postgres'),
        (ConnectionSpec(type='mysql', database='x'), 'host is required for mysql'),
        (ConnectionSpec(type='mongodb', database='x'), 'host is required for mongodb'),
    ],
)
def test_invalid_spec_raises_configuration_error(spec: ConnectionSpec, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        validate_connection_spec(spec)


def test_sqlite_never_requires_host() -> None:
    validate_connection_spec(ConnectionSpec(type='sqlite', database='x', host=''))


def test_default_port_per_engine() -> None:
    assert default_port('postgres') == 5432
    assert default_port('mysql') == 3306
    assert default_port('mongodb') == 27017
    assert default_port('sqlite') == 0
    assert default_port('oracle') == 0
    assert default_port('') == 0


def test_descriptor_lookup() -> None:
    descriptor = get_engine_descriptor('mongodb')
    assert descriptor is not None
    assert descriptor.engine_type is EngineType.MONGODB
    assert descriptor.file_extension == 'archive'
    assert get_engine_descriptor('nope') is None


def test_zero_port_resolves_to_engine_default() -> None:
    spec = ConnectionSpec(type='mysql', host='db', database='shop')
    assert spec.port == 0
    assert spec.resolved_port == 3306
    assert spec.with_default_port().port == 3306

    explicit = ConnectionSpec(type='mysql', host='db', port=3307, database='shop')
    assert explicit.with_default_port() is explicit


def test_spec_is_immutable_and_hides_password() -> None:
    spec = ConnectionSpec(type='postgres', host='db', database='app', password='hunter2')
    with pytest.raises(ValidationError):
        spec.host = 'other'
    assert 'hunter2' not in repr(spec)


def test_port_out_of_range_is_rejected() -> None:
    with pytest.raises(ValidationError, match='Port must be between 0 and 65535'):
        ConnectionSpec(type='postgres', host='db', port=70000, database='app')


def test_connection_strings() -> None:
    mongo = ConnectionSpec(type='mongodb', host='m', database='logs')
    assert mongo.connection_string() == 'mongodb://m:27017/logs'

    mongo_auth = ConnectionSpec(
        type='mongodb', host='m', username='root', password='p@ss', database='logs'
    )
    assert mongo_auth.connection_string() == 'mongodb://root:p%40ss@m:27017/logs'

    sqlite = ConnectionSpec(type='sqlite', database='/tmp/t.db')
    assert sqlite.connection_string() == '/tmp/t.db'

    assert ConnectionSpec(type='postgres', host='db', database='app').connection_string() == ''
    assert ConnectionSpec(type='oracle', database='x').connection_string() == ''
