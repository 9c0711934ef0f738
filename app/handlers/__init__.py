"""
Command and query handlers

Importing this package registers every handler on the shared mediator.
"""

from app.core.mediator import mediator
from . import activities, events

__all__ = ["mediator", "activities", "events"]
