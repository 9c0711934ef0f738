"""
Person model
"""

import uuid
from sqlalchemy import Column, Integer, String, Text, DateTime, Uuid, CheckConstraint

from app.core.db import Base

class Person(Base):
    __tablename__ = "people"

    person_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=False)
    age = Column(Integer, default=0, nullable=False)
    date_of_birth = Column(DateTime, nullable=True)
    address = Column(String(255), nullable=True)
    interests = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("length(trim(first_name)) > 0", name="ck_people_first_name"),
        CheckConstraint("length(trim(last_name)) > 0", name="ck_people_last_name"),
    )
