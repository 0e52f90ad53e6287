"""
Read-side services: dashboard aggregation and database diagnostics.
"""
from fleet_api.services.dashboard import get_dashboard_stats
from fleet_api.services.diagnostics import run_database_diagnostics

__all__ = ["get_dashboard_stats", "run_database_diagnostics"]
