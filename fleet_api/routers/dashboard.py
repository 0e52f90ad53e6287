"""
Dashboard routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_api.database import get_db
from fleet_api.schemas.dashboard import DashboardStats
from fleet_api.services.dashboard import get_dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(db: AsyncSession = Depends(get_db)):
    """
    Get fleet summary statistics.
    """
    return await get_dashboard_stats(db)
