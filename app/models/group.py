"""
Group model
"""

import uuid
from sqlalchemy import Column, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.core.db import Base
from app.models.associations import group_organizers, group_tags as group_tags_table

GROUP_KIND = "group"
EVENT_KIND = "event"

class Group(Base):
    __tablename__ = "groups"

    group_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    kind = Column(String(20), nullable=False, default=GROUP_KIND, index=True)
    group_name = Column(String(255), nullable=False)
    group_description = Column(Text, nullable=True)

    # Relationships
    organizers = relationship("Person", secondary=group_organizers)
    group_tags = relationship("Tag", secondary=group_tags_table)
    event = relationship(
        "Event",
        back_populates="group",
        uselist=False,
        cascade="all, delete-orphan",
    )
