"""Event and response persistence.

Rows are described by the column lists below and converted to and from the
public models by the ``_*_from_row`` / ``_*_params`` mapping functions.
"""

from datetime import UTC, datetime
from typing import Any

import psycopg
from psycopg.types.json import Jsonb

from practice_scheduler.db.core import Database
from practice_scheduler.db.errors import translate_error
from practice_scheduler.models.scheduler import (
    Event,
    EventCreate,
    EventWithResponses,
    Response,
    ResponseCreate,
)

EVENT_COLUMNS = "id, title, dates, time_slots, created_at"
RESPONSE_COLUMNS = "id, event_id, participant_name, selected_slots, created_at"


def _utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def _event_params(data: EventCreate) -> tuple[Any, ...]:
    return (data.id, data.title, Jsonb(data.dates), Jsonb(data.time_slots))


def _event_from_row(row: tuple) -> Event:
    return Event(
        id=row[0],
        title=row[1],
        dates=row[2],
        time_slots=row[3],
        created_at=_utc(row[4]),
    )


def _response_params(data: ResponseCreate) -> tuple[Any, ...]:
    return (data.event_id, data.participant_name, Jsonb(data.selected_slots))


def _response_from_row(row: tuple) -> Response:
    return Response(
        id=row[0],
        event_id=row[1],
        participant_name=row[2],
        selected_slots=row[3],
        created_at=_utc(row[4]),
    )


async def create_event(db: Database, data: EventCreate) -> Event:
    try:
        async with db.connection() as conn:
            cur = await conn.execute(
                f"""INSERT INTO practice_scheduler.events (id, title, dates, time_slots)
                    VALUES (%s, %s, %s, %s)
                    RETURNING {EVENT_COLUMNS}""",
                _event_params(data),
            )
            row = await cur.fetchone()
    except psycopg.Error as e:
        raise translate_error(e) from e
    return _event_from_row(row)


async def get_event(db: Database, event_id: str) -> Event | None:
    try:
        async with db.connection() as conn:
            cur = await conn.execute(
                f"SELECT {EVENT_COLUMNS} FROM practice_scheduler.events WHERE id = %s",
                (event_id,),
            )
            row = await cur.fetchone()
    except psycopg.Error as e:
        raise translate_error(e) from e
    if not row:
        return None
    return _event_from_row(row)


async def create_response(db: Database, data: ResponseCreate) -> Response:
    try:
        async with db.connection() as conn:
            cur = await conn.execute(
                f"""INSERT INTO practice_scheduler.responses (event_id, participant_name, selected_slots)
                    VALUES (%s, %s, %s)
                    RETURNING {RESPONSE_COLUMNS}""",
                _response_params(data),
            )
            row = await cur.fetchone()
    except psycopg.Error as e:
        raise translate_error(e) from e
    return _response_from_row(row)


async def get_responses_by_event(db: Database, event_id: str) -> list[Response]:
    try:
        async with db.connection() as conn:
            cur = await conn.execute(
                f"""SELECT {RESPONSE_COLUMNS} FROM practice_scheduler.responses
                    WHERE event_id = %s
                    ORDER BY seq""",
                (event_id,),
            )
            return [_response_from_row(row) async for row in cur]
    except psycopg.Error as e:
        raise translate_error(e) from e


async def get_event_with_responses(db: Database, event_id: str) -> EventWithResponses | None:
    # Two independent reads; a response inserted in between may or may not appear.
    event = await get_event(db, event_id)
    if event is None:
        return None
    responses = await get_responses_by_event(db, event_id)
    return EventWithResponses(**event.model_dump(), responses=responses)


async def delete_event(db: Database, event_id: str) -> bool:
    """Delete an event; its responses go with it through ON DELETE CASCADE."""
    try:
        async with db.connection() as conn:
            cur = await conn.execute(
                "DELETE FROM practice_scheduler.events WHERE id = %s",
                (event_id,),
            )
            return cur.rowcount > 0
    except psycopg.Error as e:
        raise translate_error(e) from e
