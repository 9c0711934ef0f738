"""
Event model

An Event extends a Group by composition: its primary key is the ``group_id``
of the Group row it belongs to, and the group-level fields are exposed as
plain attributes on the Event.
"""

import uuid
from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.core.db import Base
from app.models.associations import event_registration, event_tags
from app.models.group import Group, EVENT_KIND

class Event(Base):
    __tablename__ = "events"

    group_id = Column(Uuid, ForeignKey("groups.group_id", ondelete="CASCADE"), primary_key=True)
    event_id = Column(Uuid, unique=True, nullable=False, index=True, default=uuid.uuid4)
    event_name = Column(String(255), nullable=False)
    event_description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)

    # Relationships
    group = relationship("Group", back_populates="event", lazy="joined")
    tags = relationship("Tag", secondary=event_tags)
    registration = relationship("Person", secondary=event_registration)

    def __init__(self, group_name=None, group_description=None, organizers=None, group_tags=None, **kwargs):
        super().__init__(**kwargs)
        if self.group is None:
            group = Group(
                kind=EVENT_KIND,
                group_name=group_name,
                group_description=group_description,
                organizers=list(organizers or []),
                group_tags=list(group_tags or []),
            )
            if self.group_id is not None:
                group.group_id = self.group_id
            self.group = group

    @property
    def group_name(self):
        return self.group.group_name

    @group_name.setter
    def group_name(self, value):
        self.group.group_name = value

    @property
    def group_description(self):
        return self.group.group_description

    @group_description.setter
    def group_description(self, value):
        self.group.group_description = value

    @property
    def organizers(self):
        return self.group.organizers

    @organizers.setter
    def organizers(self, value):
        self.group.organizers = value

    @property
    def group_tags(self):
        return self.group.group_tags

    @group_tags.setter
    def group_tags(self, value):
        self.group.group_tags = value
