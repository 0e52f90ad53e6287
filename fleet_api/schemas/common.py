"""
Shared field types for request/response schemas.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, Field, PlainSerializer

# Largest value a signed 64-bit integer column holds
MAX_INTEGER = 2**63 - 1


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]

RecordId = Annotated[int, Field(le=MAX_INTEGER)]

# Decimal amounts go out as JSON numbers rather than strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
