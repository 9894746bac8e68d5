from sqlalchemy import text
from sqlalchemy.engine import Engine
from utils.logger import get_logger

logger = get_logger(__name__)

def get_db_schema_sql() -> str:
    """
    DuckDB has no SERIAL type or triggers: ids come from a sequence and
    updated_at is maintained by the ORM column's onupdate default.
    """
    return """
    CREATE SEQUENCE IF NOT EXISTS seq_songs_id START 1;

    CREATE TABLE IF NOT EXISTS songs (
        id INTEGER PRIMARY KEY DEFAULT nextval('seq_songs_id'),
        group_name VARCHAR NOT NULL,
        song_name VARCHAR NOT NULL,
        release_date DATE,
        lyrics VARCHAR DEFAULT '',
        link VARCHAR DEFAULT '',
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    );
    """

def init_raw_db(conn_engine: Engine):
    logger.info("Initializing DuckDB schema...")
    try:
        with conn_engine.begin() as conn:
            statements = [s.strip() for s in get_db_schema_sql().split(';') if s.strip()]
            for stmt in statements:
                conn.execute(text(stmt))
    except Exception as e:
        logger.error(f"Failed to initialize database schema: {e}")
        raise
