import os
import pytest
import sys
import tempfile
import uuid
from typing import Generator
from sqlmodel import Session, create_engine
from alembic.config import Config
from alembic import command

# 1. Path setup: put the backend directory on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.dirname(CURRENT_DIR)
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Keep test logs and the default database out of the user's data directory
os.environ.setdefault("SONGS_LOG_DIR", os.path.join(tempfile.gettempdir(), "song_catalog_test_logs"))
os.environ.setdefault("DB_PATH", os.path.join(tempfile.gettempdir(), "song_catalog_test", "songs.duckdb"))

import infra.database.connection as db_connection
from infra.database.schema import init_raw_db

@pytest.fixture(name="engine", scope="function")
def engine_fixture():
    """
    A fully isolated DuckDB file per test. The single engine is shared with
    Alembic to avoid DuckDB connection conflicts.
    """
    unique_id = str(uuid.uuid4())
    test_db_path = os.path.join(tempfile.gettempdir(), f"songs_test_{unique_id}.duckdb")

    connect_args = {'config': {'worker_threads': 4, 'access_mode': 'READ_WRITE'}}
    engine = create_engine(
        f"duckdb:///{test_db_path}",
        connect_args=connect_args
    )

    # Swap the application-wide engine for the test engine
    db_connection.engine = engine
    db_connection.DB_PATH = test_db_path
    db_connection.DATABASE_URL = f"duckdb:///{test_db_path}"

    # 1. Tables and sequences via raw SQL
    init_raw_db(engine)

    # 2. Stamp Alembic on the injected connection
    alembic_ini_path = os.path.join(BACKEND_DIR, "alembic.ini")
    alembic_cfg = Config(alembic_ini_path)
    alembic_cfg.set_main_option("script_location", os.path.join(BACKEND_DIR, "alembic"))

    with engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.stamp(alembic_cfg, "head")

    yield engine

    engine.dispose()
    if os.path.exists(test_db_path):
        try:
            os.remove(test_db_path)
        except OSError:
            pass

@pytest.fixture(name="session", scope="function")
def session_fixture(engine, mocker) -> Generator[Session, None, None]:
    # The app's startup init_db must not race the test setup
    mocker.patch("main.init_db")
    mocker.patch("main.close_db")

    with Session(engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator:
    """TestClient with the DB session swapped in through DI."""
    from fastapi.testclient import TestClient
    from main import app
    from infra.database.connection import get_session

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
