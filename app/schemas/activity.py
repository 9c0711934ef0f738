"""
Activity-related Pydantic schemas
"""

from datetime import datetime
from typing import Optional
from pydantic import field_validator

from .common import CamelModel, to_naive_utc

class ActivityCreate(CamelModel):
    """Schema for creating an activity"""
    id: Optional[str] = None
    title: str
    date: Optional[datetime] = None
    description: Optional[str] = None
    category: Optional[str] = None
    is_cancelled: bool = False
    city: str
    venue: str
    latitude: float = 0.0
    longitude: float = 0.0

    @field_validator("date")
    @classmethod
    def naive_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

class ActivityUpdate(CamelModel):
    """Sparse patch for an activity; unset or zero-valued fields are ignored"""
    id: Optional[str] = None
    title: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    category: Optional[str] = None
    is_cancelled: Optional[bool] = None
    city: Optional[str] = None
    venue: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator("date")
    @classmethod
    def naive_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

class ActivityResponse(CamelModel):
    """Activity response schema"""
    id: str
    title: str
    date: Optional[datetime] = None
    description: Optional[str] = None
    category: Optional[str] = None
    is_cancelled: bool
    city: str
    venue: str
    latitude: float
    longitude: float
