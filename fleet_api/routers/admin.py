"""
Administrative routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from fleet_api.database import get_engine
from fleet_api.services.diagnostics import run_database_diagnostics

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/database-health")
async def database_health(engine: AsyncEngine = Depends(get_engine)):
    """
    Run diagnostic queries against the database.

    Returns the rows of each query keyed by query name, or a 500 with an
    error message when the database cannot be reached.
    """
    return await run_database_diagnostics(engine)
