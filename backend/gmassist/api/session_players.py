# backend/gmassist/api/session_players.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, status

from gmassist.api.deps import (
    DBSession, CurrentUser, get_owned_session, get_session_child, get_or_404,
)
from gmassist.models.base import utcnow
from gmassist.models.character import PlayerCharacter
from gmassist.models.session import SessionPlayer
from gmassist.models.user import User
from gmassist.schemas.session import (
    SessionPlayerCreate, SessionPlayerUpdate, SessionPlayerResponse,
)

router = APIRouter(tags=["Session Players"])


@router.get("/sessions/{session_id}/players", response_model=List[SessionPlayerResponse])
def list_players(session_id: UUID, db: DBSession, current_user: CurrentUser):
    game_session = get_owned_session(db, session_id, current_user)
    return db.query(SessionPlayer).filter(
        SessionPlayer.session_id == game_session.id
    ).order_by(SessionPlayer.joined_at).all()


@router.post(
    "/sessions/{session_id}/players",
    response_model=SessionPlayerResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_player(
    session_id: UUID,
    player_data: SessionPlayerCreate,
    db: DBSession,
    current_user: CurrentUser,
):
    game_session = get_owned_session(db, session_id, current_user)

    user_id = player_data.user_id or current_user.id
    get_or_404(db, User, user_id, "User")
    if player_data.character_id is not None:
        get_or_404(db, PlayerCharacter, player_data.character_id, "Character")

    now = utcnow()
    player = SessionPlayer(
        session_id=game_session.id,
        user_id=user_id,
        character_id=player_data.character_id,
        role=player_data.role,
        is_online=player_data.is_online,
        joined_at=now,
        last_active=now,
    )
    db.add(player)
    db.commit()
    db.refresh(player)
    return player


@router.patch("/session-players/{player_id}", response_model=SessionPlayerResponse)
def update_player(
    player_id: UUID,
    player_data: SessionPlayerUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    player = get_session_child(db, SessionPlayer, player_id, current_user, "Session player")

    update_data = player_data.model_dump(exclude_unset=True)
    if update_data.get("character_id") is not None:
        get_or_404(db, PlayerCharacter, update_data["character_id"], "Character")
    for field, value in update_data.items():
        setattr(player, field, value)
    player.last_active = utcnow()

    db.commit()
    db.refresh(player)
    return player


@router.delete("/session-players/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_player(player_id: UUID, db: DBSession, current_user: CurrentUser):
    player = get_session_child(db, SessionPlayer, player_id, current_user, "Session player")
    db.delete(player)
    db.commit()
