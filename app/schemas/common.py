"""
Common Pydantic schemas
"""

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while accepting snake_case too"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class ErrorResponse(BaseModel):
    """Error response schema"""
    success: bool = False
    message: str
    error_code: Optional[str] = None
    details: Optional[Any] = None

def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store datetimes as naive UTC; spreadsheets cannot hold tz-aware values"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
