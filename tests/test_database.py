"""Tests for engine configuration."""

from sqlalchemy.pool import StaticPool

from notifyhub.infrastructure.database import _engine_options


def test_in_memory_sqlite_shares_a_single_connection():
    options = _engine_options("sqlite://")

    assert options["poolclass"] is StaticPool
    assert options["connect_args"] == {"check_same_thread": False}


def test_file_sqlite_keeps_a_regular_pool():
    assert "poolclass" not in _engine_options("sqlite:///./notifyhub.db")


def test_server_databases_ping_pooled_connections():
    assert _engine_options("postgresql://user@localhost/notifyhub") == {"pool_pre_ping": True}
