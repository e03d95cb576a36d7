"""Shared pytest setup: embedded SQLite, containerized PostgreSQL, employee factory."""
from __future__ import annotations

import os
from collections.abc import Callable, Generator
from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import Base
from app.models import Employee

# An already-running database; when unset a container is started instead
POSTGRESQL_URL = os.environ.get("TEST_DATABASE_URL")
POSTGRESQL_IMAGE = os.environ.get("TEST_POSTGRESQL_IMAGE", "postgres:16-alpine")


@pytest.fixture(scope="session")
def postgresql_url() -> Generator[str, None, None]:
    """
    PostgreSQL URL for the integration suite.
    Starts one throwaway container per test session; skips only when Docker is unreachable.
    """
    if POSTGRESQL_URL:
        yield POSTGRESQL_URL
        return

    from docker.errors import DockerException
    from testcontainers.postgres import PostgresContainer

    try:
        container = PostgresContainer(POSTGRESQL_IMAGE, driver="psycopg2")
        container.start()
    except DockerException as e:
        pytest.skip(f"Docker is not available: {e}")
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


def make_sqlite_engine() -> Engine:
    """One shared in-memory connection, so every session sees the same tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


def make_postgresql_engine(url: str) -> Engine:
    engine = create_engine(url)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    engine = make_sqlite_engine()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def postgresql_engine(postgresql_url: str) -> Generator[Engine, None, None]:
    engine = make_postgresql_engine(postgresql_url)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db(sqlite_engine: Engine) -> Generator[Session, None, None]:
    """Session on the embedded database; rolled back after the test."""
    factory = sessionmaker(bind=sqlite_engine, autocommit=False, autoflush=False)
    session = factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    def _make(first_name: str, last_name: str, email: str, id: Optional[int] = None) -> Employee:
        return Employee(id=id, first_name=first_name, last_name=last_name, email=email)

    return _make
