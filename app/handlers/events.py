"""
Event commands and queries
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import BadRequestError, InternalError, NotFoundError
from app.core.mapping import is_zero_uuid, merge_patch
from app.core.mediator import mediator
from app.models import Event, Person, Tag
from app.schemas.event import EventCreate, EventResponse, EventUpdate, PersonIn, TagIn
from app.services.export_service import ExportService

logger = logging.getLogger(__name__)

# Scalar fields subject to the sparse-patch rule; identifiers are never merged
EVENT_PATCH_FIELDS = (
    "event_name", "event_description", "location",
    "group_name", "group_description",
)
PEOPLE_COLLECTIONS = ("organizers", "registration")
TAG_COLLECTIONS = ("group_tags", "tags")


@dataclass
class GetEventList:
    pass


@dataclass
class GetEventDetails:
    event_id: uuid.UUID


@dataclass
class CreateEvent:
    event: Optional[EventCreate]


@dataclass
class EditEvent:
    event_id: uuid.UUID
    event: EventUpdate


@dataclass
class DeleteEvent:
    event_id: uuid.UUID


@dataclass
class DeleteEvents:
    event_ids: List[uuid.UUID] = field(default_factory=list)


@dataclass
class GetEventListExcel:
    pass


@dataclass
class GetEventListCSV:
    pass


class RelatedEntityResolver:
    """Turn incoming people/tags into session-tracked rows.

    An item naming an existing id links the stored row unchanged; anything
    else becomes a new row. Repeats within one request resolve to the same
    instance.
    """

    def __init__(self, db: Session):
        self.db = db
        self._people: Dict[uuid.UUID, Person] = {}
        self._tags: Dict[uuid.UUID, Tag] = {}

    def people(self, items: Optional[List[PersonIn]]) -> List[Person]:
        resolved: List[Person] = []
        for item in items or []:
            person = self._person(item)
            if person not in resolved:
                resolved.append(person)
        return resolved

    def tags(self, items: Optional[List[TagIn]]) -> List[Tag]:
        resolved: List[Tag] = []
        for item in items or []:
            tag = self._tag(item)
            if tag not in resolved:
                resolved.append(tag)
        return resolved

    def _person(self, item: PersonIn) -> Person:
        person_id = None if is_zero_uuid(item.person_id) else item.person_id
        if person_id in self._people:
            return self._people[person_id]

        person = self.db.get(Person, person_id) if person_id else None
        if person is None:
            person = Person(
                person_id=person_id or uuid.uuid4(),
                first_name=item.first_name,
                middle_name=item.middle_name,
                last_name=item.last_name,
                age=item.age,
                date_of_birth=item.date_of_birth,
                address=item.address,
                interests=item.interests,
            )
        self._people[person.person_id] = person
        return person

    def _tag(self, item: TagIn) -> Tag:
        tag_id = None if is_zero_uuid(item.tag_id) else item.tag_id
        if tag_id in self._tags:
            return self._tags[tag_id]

        tag = self.db.get(Tag, tag_id) if tag_id else None
        if tag is None:
            tag = Tag(tag_id=tag_id or uuid.uuid4(), tag_name=item.tag_name)
        self._tags[tag.tag_id] = tag
        return tag


def find_event(db: Session, event_id: uuid.UUID) -> Optional[Event]:
    return db.query(Event).filter(Event.event_id == event_id).first()


@mediator.handler(GetEventList)
async def get_event_list(request: GetEventList, db: Session) -> List[Event]:
    logger.info("Fetching event list")
    try:
        return db.query(Event).all()
    except Exception as exc:
        logger.error("An error occurred while fetching events", exc_info=True)
        raise InternalError("An error occurred while fetching events") from exc


@mediator.handler(GetEventDetails)
async def get_event_details(request: GetEventDetails, db: Session) -> Event:
    logger.info("Fetching event details for %s", request.event_id)
    try:
        event = find_event(db, request.event_id)
        if event is None:
            raise NotFoundError("Event not found")
    except NotFoundError:
        logger.warning("Event with ID %s not found", request.event_id)
        raise
    except Exception as exc:
        logger.error("An error occurred while fetching event %s", request.event_id, exc_info=True)
        raise InternalError("An error occurred while fetching the event") from exc

    logger.info("Event with ID %s retrieved: %s", event.event_id, event.event_name)
    return event


@mediator.handler(CreateEvent)
async def create_event(request: CreateEvent, db: Session) -> Event:
    if request.event is None:
        logger.warning("Attempted to create event without a payload")
        raise BadRequestError("Event cannot be null")

    data = request.event
    event_id = data.event_id
    if is_zero_uuid(event_id):
        event_id = uuid.uuid4()
        logger.info("Generated new EventId: %s", event_id)

    group_id = data.group_id
    if is_zero_uuid(group_id):
        group_id = uuid.uuid4()
        logger.info("Generated new GroupId: %s for Event: %s", group_id, event_id)

    try:
        resolver = RelatedEntityResolver(db)
        event = Event(
            event_id=event_id,
            group_id=group_id,
            event_name=data.event_name,
            event_description=data.event_description,
            location=data.location,
            group_name=data.group_name,
            group_description=data.group_description,
            organizers=resolver.people(data.organizers),
            group_tags=resolver.tags(data.group_tags),
            tags=resolver.tags(data.tags),
            registration=resolver.people(data.registration),
        )
        db.add(event)
        db.commit()
        db.refresh(event)
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while creating the event", exc_info=True)
        raise InternalError("An error occurred while creating the event") from exc

    logger.info("Event created successfully with ID %s: %s", event.event_id, event.event_name)
    return event


@mediator.handler(EditEvent)
async def edit_event(request: EditEvent, db: Session) -> Event:
    try:
        event = find_event(db, request.event_id)
        if event is None:
            raise NotFoundError("Event not found")

        patch = request.event
        changed = merge_patch(patch, event, EVENT_PATCH_FIELDS)

        # Collections pass through whenever a list is supplied
        resolver = RelatedEntityResolver(db)
        for name in PEOPLE_COLLECTIONS:
            items = getattr(patch, name)
            if items is not None:
                setattr(event, name, resolver.people(items))
                changed.append(name)
        for name in TAG_COLLECTIONS:
            items = getattr(patch, name)
            if items is not None:
                setattr(event, name, resolver.tags(items))
                changed.append(name)

        db.commit()
        db.refresh(event)
    except NotFoundError:
        logger.warning("Event with ID %s not found for update", request.event_id)
        raise
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while updating event with ID %s", request.event_id, exc_info=True)
        raise InternalError("An error occurred while updating the event") from exc

    logger.info("Event with ID %s updated (%s)", event.event_id, ", ".join(changed) or "no changes")
    return event


@mediator.handler(DeleteEvent)
async def delete_event(request: DeleteEvent, db: Session) -> None:
    logger.info("Deleting event with ID: %s", request.event_id)
    try:
        event = find_event(db, request.event_id)
        if event is None:
            raise NotFoundError("Event not found")

        await asyncio.sleep(settings.DELETE_DELAY_SECONDS)

        # The event row goes with its group row
        db.delete(event)
        db.delete(event.group)
        db.commit()
    except NotFoundError:
        logger.warning("Event with ID %s not found for deletion", request.event_id)
        raise
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while deleting event %s", request.event_id, exc_info=True)
        raise InternalError("An error occurred while deleting the event") from exc

    logger.info("Event with ID %s deleted", request.event_id)


@mediator.handler(DeleteEvents)
async def delete_events(request: DeleteEvents, db: Session) -> List[EventResponse]:
    """Delete every id in one commit; nothing is removed if any id is missing"""
    try:
        events = []
        for event_id in dict.fromkeys(request.event_ids):
            event = find_event(db, event_id)
            if event is None:
                raise NotFoundError(f"Event {event_id} not found")
            events.append(event)

        deleted = [EventResponse.model_validate(event) for event in events]
        await asyncio.sleep(settings.DELETE_DELAY_SECONDS)

        for event in events:
            db.delete(event)
            db.delete(event.group)
        db.commit()
    except NotFoundError as exc:
        logger.warning("%s for deletion", exc.message)
        raise
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while deleting events", exc_info=True)
        raise InternalError("An error occurred while deleting the events") from exc

    logger.info("Deleted %d events", len(deleted))
    return deleted


@mediator.handler(GetEventListExcel)
async def get_event_list_excel(request: GetEventListExcel, db: Session) -> bytes:
    logger.info("Exporting event list to Excel format")
    try:
        events = db.query(Event).all()
        content = ExportService.export_events_excel(events)
    except Exception as exc:
        logger.error("An error occurred while exporting events to Excel", exc_info=True)
        raise InternalError("An error occurred while exporting events to Excel") from exc

    logger.info("Excel export completed for %d events", len(events))
    return content


@mediator.handler(GetEventListCSV)
async def get_event_list_csv(request: GetEventListCSV, db: Session) -> str:
    logger.info("Exporting event list to CSV format")
    try:
        events = db.query(Event).all()
        content = ExportService.export_events_csv(events)
    except Exception as exc:
        logger.error("An error occurred while exporting events to CSV", exc_info=True)
        raise InternalError("An error occurred while exporting events to CSV") from exc

    logger.info("CSV export completed for %d events", len(events))
    return content
