"""
Event API routes
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.handlers import mediator
from app.handlers.events import (
    CreateEvent,
    DeleteEvent,
    DeleteEvents,
    EditEvent,
    GetEventDetails,
    GetEventList,
    GetEventListCSV,
    GetEventListExcel,
)
from app.schemas.event import EventCreate, EventResponse, EventUpdate
from app.utils.responses import csv_response, error_response, xlsx_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[EventResponse])
async def get_events(db: Session = Depends(get_db)):
    """Get all events"""
    return await mediator.send(GetEventList(), db)

@router.get("/export")
async def export_events(db: Session = Depends(get_db)):
    """Export all events to Excel format"""
    content = await mediator.send(GetEventListExcel(), db)
    return xlsx_response(content, "events.xlsx")

@router.get("/export/csv")
async def export_events_csv(db: Session = Depends(get_db)):
    """Export all events to CSV format"""
    content = await mediator.send(GetEventListCSV(), db)
    return csv_response(content, "events.csv")

@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: UUID, db: Session = Depends(get_db)):
    """Get a specific event by its EventId"""
    return await mediator.send(GetEventDetails(event_id=event_id), db)

@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, db: Session = Depends(get_db)):
    """Create a new event"""
    return await mediator.send(CreateEvent(event=event), db)

@router.put("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_event(event_id: UUID, event: EventUpdate, db: Session = Depends(get_db)):
    """Update an existing event; only meaningful fields overwrite"""
    if event.event_id != event_id:
        logger.warning("Event id mismatch: path %s, body %s", event_id, event.event_id)
        return error_response(
            message="Event id in the path does not match the body",
            error_code="id_mismatch",
            status_code=status.HTTP_400_BAD_REQUEST
        )

    await mediator.send(EditEvent(event_id=event_id, event=event), db)
    logger.info("Event %s updated successfully", event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: UUID, db: Session = Depends(get_db)):
    """Delete an event by its EventId"""
    await mediator.send(DeleteEvent(event_id=event_id), db)
    logger.info("Event %s deleted successfully", event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("", response_model=List[EventResponse])
async def delete_events(ids: List[UUID] = Query(...), db: Session = Depends(get_db)):
    """Delete several events at once and return them"""
    return await mediator.send(DeleteEvents(event_ids=ids), db)
