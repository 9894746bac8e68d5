from sqlmodel import create_engine, Session
import os
import threading
from config import settings
from infra.database.schema import init_raw_db
from utils.logger import get_logger

logger = get_logger(__name__)

# DB path from settings
DB_PATH = settings.DB_PATH
os.makedirs(os.path.dirname(DB_PATH), exist_ok=True)

DATABASE_URL = f"duckdb:///{DB_PATH}"

# Engine (fixed DuckDB config)
connect_args = {'config': {'worker_threads': 4, 'access_mode': 'READ_WRITE'}}
engine = create_engine(
    DATABASE_URL,
    pool_size=5,
    max_overflow=10,
    connect_args=connect_args
)

db_lock = threading.RLock()

def init_db():
    """
    Startup database flow: raw schema, then Alembic.
    A single connection is shared with Alembic to avoid DuckDB lock conflicts.
    """
    from alembic.config import Config
    from alembic import command

    is_new_db = not os.path.exists(DB_PATH) or os.path.getsize(DB_PATH) == 0

    with db_lock:
        try:
            # 1. Tables and sequences via raw SQL
            init_raw_db(engine)

            # 2. Alembic
            base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
            alembic_ini_path = os.path.join(base_dir, "alembic.ini")
            alembic_cfg = Config(alembic_ini_path)
            alembic_cfg.set_main_option("script_location", os.path.join(base_dir, "alembic"))

            with engine.begin() as connection:
                alembic_cfg.attributes["connection"] = connection

                if is_new_db:
                    logger.info("New database detected. Stamping version...")
                    command.stamp(alembic_cfg, "head")
                else:
                    logger.info("Existing database detected. Running migrations...")
                    command.upgrade(alembic_cfg, "head")

        except Exception as e:
            logger.error(f"Error during database initialization: {e}")
            raise

def close_db():
    """Called from the lifespan handler in main.py."""
    engine.dispose()

def get_session():
    with Session(engine) as session:
        yield session
