"""
Many-to-many join tables

Rows cascade away with either parent; People and Tags are never owned.
"""

from sqlalchemy import Column, ForeignKey, Table

from app.core.db import Base

group_organizers = Table(
    "group_organizers",
    Base.metadata,
    Column("group_id", ForeignKey("groups.group_id", ondelete="CASCADE"), primary_key=True),
    Column("person_id", ForeignKey("people.person_id", ondelete="CASCADE"), primary_key=True),
)

group_tags = Table(
    "group_tags",
    Base.metadata,
    Column("group_id", ForeignKey("groups.group_id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.tag_id", ondelete="CASCADE"), primary_key=True),
)

event_tags = Table(
    "event_tags",
    Base.metadata,
    Column("group_id", ForeignKey("events.group_id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.tag_id", ondelete="CASCADE"), primary_key=True),
)

event_registration = Table(
    "event_registration",
    Base.metadata,
    Column("group_id", ForeignKey("events.group_id", ondelete="CASCADE"), primary_key=True),
    Column("person_id", ForeignKey("people.person_id", ondelete="CASCADE"), primary_key=True),
)

ASSOCIATION_TABLES = (group_organizers, group_tags, event_tags, event_registration)
