"""
Activity model
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, Float

from app.core.db import Base

class Activity(Base):
    __tablename__ = "activities"

    id = Column(String(36), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(DateTime, nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    is_cancelled = Column(Boolean, default=False, nullable=False)

    # Location
    city = Column(String(255), nullable=False)
    venue = Column(String(255), nullable=False)
    latitude = Column(Float, default=0.0, nullable=False)
    longitude = Column(Float, default=0.0, nullable=False)
