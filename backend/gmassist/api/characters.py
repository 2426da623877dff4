# backend/gmassist/api/characters.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy.orm import Session

from gmassist.api.deps import DBSession, CurrentUser, get_owned_session, not_found
from gmassist.models.character import PlayerCharacter
from gmassist.models.user import User
from gmassist.schemas.character import CharacterCreate, CharacterUpdate, CharacterResponse

router = APIRouter(prefix="/characters", tags=["Characters"])


def _get_character(db: Session, character_id: UUID, user: User) -> PlayerCharacter:
    character = db.query(PlayerCharacter).filter(
        PlayerCharacter.id == character_id, PlayerCharacter.user_id == user.id
    ).first()
    if not character:
        raise not_found("Character")
    return character


@router.get("", response_model=List[CharacterResponse])
def list_characters(
    db: DBSession,
    current_user: CurrentUser,
    session_id: Optional[UUID] = Query(None, alias="sessionId"),
):
    query = db.query(PlayerCharacter).filter(PlayerCharacter.user_id == current_user.id)
    if session_id is not None:
        query = query.filter(PlayerCharacter.session_id == session_id)
    return query.order_by(PlayerCharacter.created_at).all()


@router.post("", response_model=CharacterResponse, status_code=status.HTTP_201_CREATED)
def create_character(character_data: CharacterCreate, db: DBSession, current_user: CurrentUser):
    if character_data.session_id is not None:
        get_owned_session(db, character_data.session_id, current_user)

    character = PlayerCharacter(user_id=current_user.id, **character_data.model_dump())
    db.add(character)
    db.commit()
    db.refresh(character)
    return character


@router.get("/{character_id}", response_model=CharacterResponse)
def get_character(character_id: UUID, db: DBSession, current_user: CurrentUser):
    return _get_character(db, character_id, current_user)


@router.patch("/{character_id}", response_model=CharacterResponse)
def update_character(
    character_id: UUID,
    character_data: CharacterUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    character = _get_character(db, character_id, current_user)

    update_data = character_data.model_dump(exclude_unset=True)
    if update_data.get("session_id") is not None:
        get_owned_session(db, update_data["session_id"], current_user)
    for field, value in update_data.items():
        setattr(character, field, value)

    db.commit()
    db.refresh(character)
    return character


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_character(character_id: UUID, db: DBSession, current_user: CurrentUser):
    """Delete a character and the session seats that use it"""
    character = _get_character(db, character_id, current_user)
    db.delete(character)
    db.commit()
