import logging

from fastapi import APIRouter
from pydantic import ValidationError as PydanticValidationError

from practice_scheduler import db
from practice_scheduler.dependencies import DB
from practice_scheduler.errors import (
    ConstraintViolationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
    describe_fields,
    field_errors,
)
from practice_scheduler.models.scheduler import (
    Event,
    EventCreate,
    EventWithResponses,
    Response,
    ResponseCreate,
    ResponseSubmission,
)

logger = logging.getLogger("practice_scheduler.events")
router = APIRouter()


def _storage_to_api_error(e: db.StorageError, **context) -> Exception:
    if isinstance(e, db.ConstraintViolation):
        return ConstraintViolationError(
            detail=e.message,
            error_code=e.code,
            store_detail=e.detail or "Unknown error",
            **context,
        )
    if isinstance(e, db.InvalidValue):
        return ValidationError(detail=e.message, error_code=e.code, **context)
    return DatabaseError(detail=e.message, error_code=e.code, **context)


@router.post("/events", response_model=Event)
async def create_event(req: EventCreate, database: DB) -> Event:
    logger.info("POST /events id=%s dates=%d time_slots=%d", req.id, len(req.dates), len(req.time_slots))
    try:
        event = await db.create_event(database, req)
    except db.StorageError as e:
        logger.exception("Failed to create event id=%s", req.id)
        raise _storage_to_api_error(e, event_id=req.id) from e
    logger.info("Created event id=%s", event.id)
    return event


@router.get("/events/{event_id}", response_model=Event)
async def get_event(event_id: str, database: DB) -> Event:
    logger.info("GET /events/%s", event_id)
    try:
        event = await db.get_event(database, event_id)
    except db.StorageError as e:
        logger.exception("Failed to load event id=%s", event_id)
        raise _storage_to_api_error(e, event_id=event_id) from e
    if event is None:
        logger.warning("Event not found: %s", event_id)
        raise NotFoundError(detail="Event not found", event_id=event_id)
    return event


@router.get("/events/{event_id}/group", response_model=EventWithResponses)
async def get_event_group(event_id: str, database: DB) -> EventWithResponses:
    logger.info("GET /events/%s/group", event_id)
    try:
        group = await db.get_event_with_responses(database, event_id)
    except db.StorageError as e:
        logger.exception("Failed to load event group id=%s", event_id)
        raise _storage_to_api_error(e, event_id=event_id) from e
    if group is None:
        logger.warning("Event not found: %s", event_id)
        raise NotFoundError(detail="Event not found", event_id=event_id)
    logger.info("Returning event %s with %d responses", event_id, len(group.responses))
    return group


@router.post("/events/{event_id}/responses", response_model=Response)
async def submit_response(event_id: str, req: ResponseSubmission, database: DB) -> Response:
    logger.info(
        "POST /events/%s/responses participant=%s slots=%d",
        event_id,
        req.participant_name,
        len(req.selected_slots),
    )
    try:
        data = ResponseCreate(event_id=event_id, **req.model_dump())
    except PydanticValidationError as e:
        fields = field_errors(e.errors())
        raise ValidationError(detail=describe_fields(fields), fields=fields, event_id=event_id) from e
    try:
        response = await db.create_response(database, data)
    except db.StorageError as e:
        logger.exception("Failed to submit response for event %s", event_id)
        raise _storage_to_api_error(e, event_id=event_id) from e
    logger.info("Created response id=%s for event %s", response.id, event_id)
    return response
