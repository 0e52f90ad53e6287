"""
API routers.
"""
from typing import Annotated

from fastapi import Path

from fleet_api.schemas.common import MAX_INTEGER

# Ids past the integer column range can never match a row
RecordIdPath = Annotated[int, Path(le=MAX_INTEGER)]
