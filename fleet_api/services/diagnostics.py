"""
Database diagnostic queries for the admin health endpoint.
"""
import logging
import time
from typing import Any, Dict, List

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from fleet_api.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

DIAGNOSTIC_QUERIES: Dict[str, Dict[str, str]] = {
    "postgresql": {
        "CurrentlyExecuting": (
            "SELECT pid AS session_id, state AS status, query AS command "
            "FROM pg_stat_activity WHERE state = 'active'"
        ),
        "DatabaseSize": (
            "SELECT datname AS db_name, pg_database_size(datname) / 1024 / 1024 AS size_mb "
            "FROM pg_database"
        ),
        "ActiveConnections": (
            "SELECT datname AS db_name, COUNT(*) AS connections FROM pg_stat_activity "
            "WHERE datname IS NOT NULL GROUP BY datname"
        ),
    },
    "mssql": {
        "CurrentlyExecuting": (
            "SELECT session_id, status, command FROM sys.dm_exec_requests WHERE session_id > 50"
        ),
        "DatabaseSize": (
            "SELECT DB_NAME(database_id) AS db_name, SUM(size) * 8 / 1024 AS size_mb "
            "FROM sys.master_files GROUP BY database_id"
        ),
        "ActiveConnections": (
            "SELECT DB_NAME(dbid) AS db_name, COUNT(dbid) AS connections "
            "FROM sys.sysprocesses WHERE dbid > 0 GROUP BY dbid"
        ),
    },
    # SQLite has no server sessions; report attached databases and file size instead
    "sqlite": {
        "CurrentlyExecuting": "SELECT seq AS session_id, name AS db_name, file FROM pragma_database_list",
        "DatabaseSize": (
            "SELECT page_count * page_size / 1024.0 / 1024.0 AS size_mb "
            "FROM pragma_page_count(), pragma_page_size()"
        ),
        "ActiveConnections": "SELECT 'main' AS db_name, 1 AS connections",
    },
}


async def _run_query(conn: AsyncConnection, name: str, query: str) -> List[Dict[str, Any]]:
    logger.info("Running diagnostic query: %s", name)
    result = await conn.execute(text(query))
    return [dict(row._mapping) for row in result]


async def run_database_diagnostics(engine: AsyncEngine) -> Dict[str, List[Dict[str, Any]]]:
    """
    Run the fixed diagnostic queries for the engine's dialect.

    Returns:
        Mapping of query name to its rows

    Raises:
        StorageUnavailableError: if the database cannot be reached or a query fails
    """
    started = time.perf_counter()
    logger.info("Starting database health check...")

    queries = DIAGNOSTIC_QUERIES.get(engine.dialect.name)
    if queries is None:
        raise StorageUnavailableError(
            "Error retrieving database diagnostics",
            f"No diagnostic queries for dialect '{engine.dialect.name}'",
        )

    results: Dict[str, List[Dict[str, Any]]] = {}
    try:
        async with engine.connect() as conn:
            for name, query in queries.items():
                results[name] = await _run_query(conn, name, query)
    except (SQLAlchemyError, OSError) as exc:
        logger.exception("Error running database health check")
        raise StorageUnavailableError("Error retrieving database diagnostics", str(exc)) from exc

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("Database health check completed in %.0f ms", elapsed_ms)
    return results
