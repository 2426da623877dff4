# backend/gmassist/api/timeline.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, status

from gmassist.api.deps import (
    DBSession, CurrentUser, get_owned_session, get_session_child, field_error,
)
from gmassist.models.timeline import TimelineEvent
from gmassist.schemas.timeline import (
    TimelineEventCreate, TimelineEventUpdate, TimelineEventResponse, TimelineReorder,
)

router = APIRouter(tags=["Timeline"])


def _ordered_events(db, session_id: UUID) -> List[TimelineEvent]:
    return db.query(TimelineEvent).filter(
        TimelineEvent.session_id == session_id
    ).order_by(TimelineEvent.order_index, TimelineEvent.created_at).all()


@router.get("/sessions/{session_id}/timeline", response_model=List[TimelineEventResponse])
def list_timeline(session_id: UUID, db: DBSession, current_user: CurrentUser):
    game_session = get_owned_session(db, session_id, current_user)
    return _ordered_events(db, game_session.id)


@router.post(
    "/sessions/{session_id}/timeline/reorder",
    response_model=List[TimelineEventResponse],
)
def reorder_timeline(
    session_id: UUID,
    reorder: TimelineReorder,
    db: DBSession,
    current_user: CurrentUser,
):
    """Rewrite order indexes to follow ``orderedIds``.

    Events left out of the list keep their relative order after the listed ones.
    """
    game_session = get_owned_session(db, session_id, current_user)
    events = _ordered_events(db, game_session.id)
    by_id = {event.id: event for event in events}

    foreign = [str(event_id) for event_id in reorder.ordered_ids if event_id not in by_id]
    if foreign:
        raise field_error(
            "orderedIds",
            f"Events not found in this session: {', '.join(foreign)}",
        )
    listed_ids = set(reorder.ordered_ids)
    if len(listed_ids) != len(reorder.ordered_ids):
        raise field_error("orderedIds", "Event ids must not repeat")

    listed = [by_id[event_id] for event_id in reorder.ordered_ids]
    rest = [event for event in events if event.id not in listed_ids]
    for index, event in enumerate(listed + rest):
        event.order_index = index

    db.commit()
    return _ordered_events(db, game_session.id)


@router.post(
    "/timeline-events",
    response_model=TimelineEventResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_timeline_event(event_data: TimelineEventCreate, db: DBSession, current_user: CurrentUser):
    get_owned_session(db, event_data.session_id, current_user)

    event = TimelineEvent(**event_data.model_dump())
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


@router.get("/timeline-events/{event_id}", response_model=TimelineEventResponse)
def get_timeline_event(event_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_session_child(db, TimelineEvent, event_id, current_user, "Timeline event")


@router.patch("/timeline-events/{event_id}", response_model=TimelineEventResponse)
def update_timeline_event(
    event_id: UUID,
    event_data: TimelineEventUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    event = get_session_child(db, TimelineEvent, event_id, current_user, "Timeline event")

    update_data = event_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(event, field, value)

    db.commit()
    db.refresh(event)
    return event


@router.delete("/timeline-events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_timeline_event(event_id: UUID, db: DBSession, current_user: CurrentUser):
    event = get_session_child(db, TimelineEvent, event_id, current_user, "Timeline event")
    db.delete(event)
    db.commit()
