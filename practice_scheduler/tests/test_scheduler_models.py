import pytest
from pydantic import ValidationError

from practice_scheduler.models.scheduler import EventCreate, ResponseCreate, ResponseSubmission


def test_event_create_accepts_camel_case():
    event = EventCreate.model_validate(
        {"id": "abc", "title": " Practice ", "dates": ["2024-01-01"], "timeSlots": ["9am"]}
    )
    assert event.title == " Practice "
    assert event.time_slots == ["9am"]


def test_padded_values_are_kept_as_sent():
    event = EventCreate.model_validate(
        {"id": " abc ", "title": " Practice ", "dates": ["2024-01-01"], "timeSlots": ["9am"]}
    )
    response = ResponseCreate(event_id=" abc ", participant_name=" Alice ", selected_slots=[])

    assert event.id == " abc "
    assert event.title == " Practice "
    assert response.event_id == " abc "
    assert response.participant_name == " Alice "


def test_event_create_drops_server_fields():
    event = EventCreate.model_validate(
        {
            "id": "abc",
            "title": "Practice",
            "dates": ["2024-01-01"],
            "timeSlots": ["9am"],
            "createdAt": "2024-01-01T00:00:00Z",
        }
    )
    assert set(event.model_dump()) == {"id", "title", "dates", "time_slots"}


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"id": ""}, "id"),
        ({"title": "  "}, "title"),
        ({"dates": []}, "dates"),
        ({"timeSlots": []}, "timeSlots"),
        ({"timeSlots": "9am"}, "timeSlots"),
        ({"id": "a\x00b"}, "id"),
        ({"title": "Prac\x00tice"}, "title"),
        ({"dates": ["2024-01-01\x00"]}, "dates"),
        ({"timeSlots": ["9am", "\x00"]}, "timeSlots"),
    ],
)
def test_event_create_rejects_bad_fields(overrides, field):
    payload = {"id": "abc", "title": "Practice", "dates": ["2024-01-01"], "timeSlots": ["9am"]}
    payload.update(overrides)

    with pytest.raises(ValidationError) as exc_info:
        EventCreate.model_validate(payload)

    assert [e["loc"][0] for e in exc_info.value.errors()] == [field]


def test_response_submission_ignores_ids():
    body = ResponseSubmission.model_validate(
        {"id": "x", "eventId": "other", "participantName": "Alice", "selectedSlots": ["9am"]}
    )
    assert set(body.model_dump()) == {"participant_name", "selected_slots"}


def test_response_create_requires_participant_name():
    with pytest.raises(ValidationError):
        ResponseCreate(event_id="abc", participant_name="", selected_slots=[])


def test_response_create_allows_empty_selection():
    response = ResponseCreate(event_id="abc", participant_name="Alice", selected_slots=[])
    assert response.selected_slots == []


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"participantName": "Al\x00ice"}, "participantName"),
        ({"selectedSlots": ["9am\x00"]}, "selectedSlots"),
    ],
)
def test_response_submission_rejects_nul(overrides, field):
    payload = {"participantName": "Alice", "selectedSlots": ["9am"]}
    payload.update(overrides)

    with pytest.raises(ValidationError) as exc_info:
        ResponseSubmission.model_validate(payload)

    assert [e["loc"][0] for e in exc_info.value.errors()] == [field]
