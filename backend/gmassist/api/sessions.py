# backend/gmassist/api/sessions.py
import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from gmassist.api.deps import DBSession, CurrentUser, get_owned_session, field_error
from gmassist.models.scenario import Scenario, ScenarioSession
from gmassist.models.session import GameSession
from gmassist.schemas.pacing import PacingAssessment
from gmassist.schemas.scenario import ScenarioResponse
from gmassist.schemas.session import SessionCreate, SessionUpdate, SessionResponse
from gmassist.services.pacing import assess_pacing, phase_count

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def _check_phase(creator_mode, current_phase: int) -> None:
    count = phase_count(creator_mode)
    if current_phase >= count:
        raise field_error(
            "currentPhase",
            f"Phase index must be between 0 and {count - 1} for {creator_mode.value} sessions",
        )


@router.get("", response_model=List[SessionResponse])
def list_sessions(db: DBSession, current_user: CurrentUser):
    return db.query(GameSession).filter(
        GameSession.user_id == current_user.id
    ).order_by(GameSession.updated_at.desc()).all()


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(session_data: SessionCreate, db: DBSession, current_user: CurrentUser):
    _check_phase(session_data.creator_mode, session_data.current_phase)

    game_session = GameSession(user_id=current_user.id, **session_data.model_dump())
    db.add(game_session)
    db.commit()
    db.refresh(game_session)
    logger.info(f"Created {game_session.creator_mode.value} session {game_session.id}")
    return game_session


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_owned_session(db, session_id, current_user)


@router.patch("/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: UUID,
    session_data: SessionUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    game_session = get_owned_session(db, session_id, current_user)

    update_data = session_data.model_dump(exclude_unset=True)
    _check_phase(
        update_data.get("creator_mode", game_session.creator_mode),
        update_data.get("current_phase", game_session.current_phase),
    )
    for field, value in update_data.items():
        setattr(game_session, field, value)

    db.commit()
    db.refresh(game_session)
    return game_session


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: UUID, db: DBSession, current_user: CurrentUser):
    """Delete a session with its board, timeline, players and scenario links.

    Characters assigned to the session are kept and detached.
    """
    game_session = get_owned_session(db, session_id, current_user)
    db.delete(game_session)
    db.commit()
    logger.info(f"Deleted session {session_id}")


@router.get("/{session_id}/pacing", response_model=PacingAssessment)
def get_session_pacing(
    session_id: UUID,
    db: DBSession,
    current_user: CurrentUser,
    elapsed_minutes: Optional[int] = Query(None, alias="elapsedMinutes", ge=0),
):
    """Compare elapsed time with the phase schedule. Defaults to the stored duration."""
    game_session = get_owned_session(db, session_id, current_user)
    elapsed = game_session.duration if elapsed_minutes is None else elapsed_minutes
    try:
        return assess_pacing(game_session.creator_mode, game_session.current_phase, elapsed)
    except ValueError as e:
        raise field_error("currentPhase", str(e))


@router.get("/{session_id}/scenarios", response_model=List[ScenarioResponse])
def list_linked_scenarios(session_id: UUID, db: DBSession, current_user: CurrentUser):
    game_session = get_owned_session(db, session_id, current_user)
    return db.query(Scenario).join(
        ScenarioSession, ScenarioSession.scenario_id == Scenario.id
    ).filter(
        ScenarioSession.session_id == game_session.id
    ).order_by(ScenarioSession.created_at).all()
