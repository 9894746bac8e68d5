import os
import sys
from alembic import context
from alembic.ddl.impl import DefaultImpl

# Backend modules are importable when alembic is run from the CLI as well
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import Song

class DuckDBImpl(DefaultImpl):
    """Registers the duckdb dialect with Alembic (DDL is Postgres-like)."""
    __dialect__ = 'duckdb'

def run_migrations(connection) -> None:
    context.configure(connection=connection, target_metadata=Song.metadata)
    with context.begin_transaction():
        context.run_migrations()

# DuckDB allows one writer per file: init_db and the tests hand over their
# open connection; the CLI borrows one from the application engine.
connection = context.config.attributes.get("connection")
if connection is not None:
    run_migrations(connection)
else:
    from infra.database.connection import engine
    with engine.begin() as cli_connection:
        run_migrations(cli_connection)
