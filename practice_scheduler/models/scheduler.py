from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys, also accepts field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _non_empty(v: str, field: str) -> str:
    if not v.strip():
        raise ValueError(f"{field} must not be empty")
    if "\x00" in v:
        raise ValueError(f"{field} must not contain NUL characters")
    return v


def _no_nul_items(v: list[str], field: str) -> list[str]:
    if any("\x00" in item for item in v):
        raise ValueError(f"{field} must not contain NUL characters")
    return v


class EventCreate(CamelModel):
    id: str
    title: str
    dates: list[str]
    time_slots: list[str]

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return _non_empty(v, "id")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _non_empty(v, "title")

    @field_validator("dates")
    @classmethod
    def validate_dates(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("dates must not be empty")
        return _no_nul_items(v, "dates")

    @field_validator("time_slots")
    @classmethod
    def validate_time_slots(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("time_slots must not be empty")
        return _no_nul_items(v, "time_slots")


class ResponseSubmission(CamelModel):
    """Body of POST /events/{id}/responses; the event id comes from the path."""

    participant_name: str
    selected_slots: list[str]

    @field_validator("participant_name")
    @classmethod
    def validate_participant_name(cls, v: str) -> str:
        return _non_empty(v, "participant_name")

    @field_validator("selected_slots")
    @classmethod
    def validate_selected_slots(cls, v: list[str]) -> list[str]:
        return _no_nul_items(v, "selected_slots")


class ResponseCreate(ResponseSubmission):
    event_id: str

    @field_validator("event_id")
    @classmethod
    def validate_event_id(cls, v: str) -> str:
        return _non_empty(v, "event_id")


class Event(CamelModel):
    id: str
    title: str
    dates: list[str]
    time_slots: list[str]
    created_at: datetime


class Response(CamelModel):
    id: UUID
    event_id: str
    participant_name: str
    selected_slots: list[str]
    created_at: datetime


class EventWithResponses(Event):
    responses: list[Response]
