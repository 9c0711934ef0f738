"""
Database models package
"""

from .activity import Activity
from .person import Person
from .tag import Tag
from .group import Group, GROUP_KIND, EVENT_KIND
from .event import Event
from .associations import ASSOCIATION_TABLES

__all__ = [
    "Activity",
    "Person",
    "Tag",
    "Group",
    "Event",
    "GROUP_KIND",
    "EVENT_KIND",
    "ASSOCIATION_TABLES",
]
