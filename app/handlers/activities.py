"""
Activity commands and queries
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import BadRequestError, InternalError, NotFoundError
from app.core.mapping import is_zero_uuid, merge_patch
from app.core.mediator import mediator
from app.models import Activity
from app.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from app.services.export_service import ExportService

logger = logging.getLogger(__name__)

# Scalar fields subject to the sparse-patch rule on edit
ACTIVITY_PATCH_FIELDS = (
    "title", "date", "description", "category", "is_cancelled",
    "city", "venue", "latitude", "longitude",
)


@dataclass
class GetActivityList:
    pass


@dataclass
class GetActivityDetails:
    id: str


@dataclass
class CreateActivity:
    activity: Optional[ActivityCreate]


@dataclass
class EditActivity:
    id: str
    activity: ActivityUpdate


@dataclass
class DeleteActivity:
    id: str


@dataclass
class DeleteActivities:
    ids: List[str] = field(default_factory=list)


@dataclass
class GetActivityListExcel:
    pass


@dataclass
class GetActivityListCSV:
    pass


@mediator.handler(GetActivityList)
async def get_activity_list(request: GetActivityList, db: Session) -> List[Activity]:
    logger.info("Fetching activity list")
    try:
        return db.query(Activity).all()
    except Exception as exc:
        logger.error("An error occurred while fetching activities", exc_info=True)
        raise InternalError("An error occurred while fetching activities") from exc


@mediator.handler(GetActivityDetails)
async def get_activity_details(request: GetActivityDetails, db: Session) -> Activity:
    try:
        activity = db.get(Activity, request.id)
        if activity is None:
            raise NotFoundError("Activity not found")
        return activity
    except NotFoundError:
        logger.warning("Activity %s not found", request.id)
        raise
    except Exception as exc:
        logger.error("An error occurred while fetching activity %s", request.id, exc_info=True)
        raise InternalError("An error occurred while fetching the activity") from exc


@mediator.handler(CreateActivity)
async def create_activity(request: CreateActivity, db: Session) -> Activity:
    if request.activity is None:
        logger.warning("Attempted to create activity without a payload")
        raise BadRequestError("Activity cannot be null")

    data = request.activity
    activity_id = data.id
    if is_zero_uuid(activity_id):
        activity_id = str(uuid.uuid4())
        logger.info("Generated new activity id %s", activity_id)

    try:
        activity = Activity(
            id=activity_id,
            title=data.title,
            date=data.date,
            description=data.description,
            category=data.category,
            is_cancelled=data.is_cancelled,
            city=data.city,
            venue=data.venue,
            latitude=data.latitude,
            longitude=data.longitude,
        )
        db.add(activity)
        db.commit()
        db.refresh(activity)
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while creating the activity", exc_info=True)
        raise InternalError("An error occurred while creating the activity") from exc

    logger.info("Activity %s created: %s", activity.id, activity.title)
    return activity


@mediator.handler(EditActivity)
async def edit_activity(request: EditActivity, db: Session) -> Activity:
    try:
        activity = db.get(Activity, request.id)
        if activity is None:
            raise NotFoundError("Activity not found")

        changed = merge_patch(request.activity, activity, ACTIVITY_PATCH_FIELDS)
        db.commit()
        db.refresh(activity)
    except NotFoundError:
        logger.warning("Activity %s not found for update", request.id)
        raise
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while updating activity %s", request.id, exc_info=True)
        raise InternalError("An error occurred while updating the activity") from exc

    logger.info("Activity %s updated (%s)", activity.id, ", ".join(changed) or "no changes")
    return activity


@mediator.handler(DeleteActivity)
async def delete_activity(request: DeleteActivity, db: Session) -> None:
    try:
        activity = db.get(Activity, request.id)
        if activity is None:
            raise NotFoundError("Activity not found")

        await asyncio.sleep(settings.DELETE_DELAY_SECONDS)

        db.delete(activity)
        db.commit()
    except NotFoundError:
        logger.warning("Activity %s not found for deletion", request.id)
        raise
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while deleting activity %s", request.id, exc_info=True)
        raise InternalError("An error occurred while deleting the activity") from exc

    logger.info("Activity %s deleted", request.id)


@mediator.handler(DeleteActivities)
async def delete_activities(request: DeleteActivities, db: Session) -> List[ActivityResponse]:
    """Delete every id in one commit; nothing is removed if any id is missing"""
    try:
        activities = []
        for activity_id in dict.fromkeys(request.ids):
            activity = db.get(Activity, activity_id)
            if activity is None:
                raise NotFoundError(f"Activity {activity_id} not found")
            activities.append(activity)

        deleted = [ActivityResponse.model_validate(activity) for activity in activities]
        await asyncio.sleep(settings.DELETE_DELAY_SECONDS)

        for activity in activities:
            db.delete(activity)
        db.commit()
    except NotFoundError as exc:
        logger.warning("%s for deletion", exc.message)
        raise
    except Exception as exc:
        db.rollback()
        logger.error("An error occurred while deleting activities", exc_info=True)
        raise InternalError("An error occurred while deleting the activities") from exc

    logger.info("Deleted %d activities", len(deleted))
    return deleted


@mediator.handler(GetActivityListExcel)
async def get_activity_list_excel(request: GetActivityListExcel, db: Session) -> bytes:
    logger.info("Exporting activity list to Excel format")
    try:
        activities = db.query(Activity).all()
        return ExportService.export_activities_excel(activities)
    except Exception as exc:
        logger.error("An error occurred while exporting activities to Excel", exc_info=True)
        raise InternalError("An error occurred while exporting activities to Excel") from exc


@mediator.handler(GetActivityListCSV)
async def get_activity_list_csv(request: GetActivityListCSV, db: Session) -> str:
    logger.info("Exporting activity list to CSV format")
    try:
        activities = db.query(Activity).all()
        return ExportService.export_activities_csv(activities)
    except Exception as exc:
        logger.error("An error occurred while exporting activities to CSV", exc_info=True)
        raise InternalError("An error occurred while exporting activities to CSV") from exc
