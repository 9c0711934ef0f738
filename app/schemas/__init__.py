"""
Pydantic schemas package
"""

from .common import *
from .activity import *
from .event import *

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "ActivityCreate",
    "ActivityUpdate",
    "ActivityResponse",
    "PersonIn",
    "PersonResponse",
    "TagIn",
    "TagResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
]
