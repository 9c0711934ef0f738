"""
Activity API routes
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.handlers import mediator
from app.handlers.activities import (
    CreateActivity,
    DeleteActivities,
    DeleteActivity,
    EditActivity,
    GetActivityDetails,
    GetActivityList,
    GetActivityListCSV,
    GetActivityListExcel,
)
from app.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from app.utils.responses import csv_response, error_response, xlsx_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[ActivityResponse])
async def get_activities(db: Session = Depends(get_db)):
    """Get all activities"""
    return await mediator.send(GetActivityList(), db)

@router.get("/export")
async def export_activities(db: Session = Depends(get_db)):
    """Export all activities to Excel format"""
    content = await mediator.send(GetActivityListExcel(), db)
    return xlsx_response(content, "activities.xlsx")

@router.get("/export/csv")
async def export_activities_csv(db: Session = Depends(get_db)):
    """Export all activities to CSV format"""
    content = await mediator.send(GetActivityListCSV(), db)
    return csv_response(content, "activities.csv")

@router.get("/{activity_id}", response_model=ActivityResponse)
async def get_activity(activity_id: str, db: Session = Depends(get_db)):
    """Get a specific activity by id"""
    return await mediator.send(GetActivityDetails(id=activity_id), db)

@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(activity: ActivityCreate, db: Session = Depends(get_db)):
    """Create a new activity"""
    return await mediator.send(CreateActivity(activity=activity), db)

@router.put("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_activity(activity_id: str, activity: ActivityUpdate, db: Session = Depends(get_db)):
    """Update an existing activity; only meaningful fields overwrite"""
    if activity.id != activity_id:
        logger.warning("Activity id mismatch: path %s, body %s", activity_id, activity.id)
        return error_response(
            message="Activity id in the path does not match the body",
            error_code="id_mismatch",
            status_code=status.HTTP_400_BAD_REQUEST
        )

    await mediator.send(EditActivity(id=activity_id, activity=activity), db)
    logger.info("Activity %s updated successfully", activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(activity_id: str, db: Session = Depends(get_db)):
    """Delete an activity by id"""
    await mediator.send(DeleteActivity(id=activity_id), db)
    logger.info("Activity %s deleted successfully", activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("", response_model=List[ActivityResponse])
async def delete_activities(ids: List[str] = Query(...), db: Session = Depends(get_db)):
    """Delete several activities at once and return them"""
    return await mediator.send(DeleteActivities(ids=ids), db)
