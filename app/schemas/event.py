"""
Event-related Pydantic schemas, including the nested people and tags
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import Field, field_validator

from .common import CamelModel, to_naive_utc

class PersonIn(CamelModel):
    """A person attached to a group or event; an existing personId links the stored row"""
    person_id: Optional[UUID] = None
    first_name: str = Field(min_length=1)
    middle_name: Optional[str] = None
    last_name: str = Field(min_length=1)
    age: int = 0
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    interests: Optional[str] = None

    @field_validator("date_of_birth")
    @classmethod
    def naive_date_of_birth(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

class PersonResponse(CamelModel):
    person_id: UUID
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    age: int
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    interests: Optional[str] = None

class TagIn(CamelModel):
    """A tag; an existing tagId links the stored row"""
    tag_id: Optional[UUID] = None
    tag_name: str = Field(min_length=1)

    @field_validator("tag_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

class TagResponse(CamelModel):
    tag_id: UUID
    tag_name: str

class EventCreate(CamelModel):
    """Schema for creating an event together with its group"""
    event_id: Optional[UUID] = None
    event_name: str
    event_description: Optional[str] = None
    location: Optional[str] = None
    group_id: Optional[UUID] = None
    group_name: str
    group_description: Optional[str] = None
    organizers: List[PersonIn]
    group_tags: Optional[List[TagIn]] = None
    tags: Optional[List[TagIn]] = None
    registration: Optional[List[PersonIn]] = None

class EventUpdate(CamelModel):
    """Sparse patch for an event; a provided list replaces the stored collection"""
    event_id: Optional[UUID] = None
    event_name: Optional[str] = None
    event_description: Optional[str] = None
    location: Optional[str] = None
    group_id: Optional[UUID] = None
    group_name: Optional[str] = None
    group_description: Optional[str] = None
    organizers: Optional[List[PersonIn]] = None
    group_tags: Optional[List[TagIn]] = None
    tags: Optional[List[TagIn]] = None
    registration: Optional[List[PersonIn]] = None

class EventResponse(CamelModel):
    """Event response schema, flattened over its group"""
    event_id: UUID
    event_name: str
    event_description: Optional[str] = None
    location: Optional[str] = None
    group_id: UUID
    group_name: str
    group_description: Optional[str] = None
    organizers: List[PersonResponse] = []
    group_tags: List[TagResponse] = []
    tags: List[TagResponse] = []
    registration: List[PersonResponse] = []
