# backend/gmassist/api/deps.py
from typing import Annotated, Type, TypeVar
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from gmassist.database import get_db
from gmassist.models.user import User
from gmassist.models.scenario import Scenario
from gmassist.models.session import GameSession
from gmassist.utils.security import decode_access_token

security = HTTPBearer()

M = TypeVar("M")


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Extract and validate user from JWT token."""
    user_id = decode_access_token(credentials.credentials)

    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is deactivated",
        )

    return user


# Type aliases for dependency injection
DBSession = Annotated[Session, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]


def not_found(label: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{label} not found",
    )


def get_or_404(db: Session, model: Type[M], obj_id: UUID, label: str) -> M:
    obj = db.query(model).filter(model.id == obj_id).first()
    if obj is None:
        raise not_found(label)
    return obj


def get_owned_scenario(db: Session, scenario_id: UUID, user: User) -> Scenario:
    """Scenarios of other users are reported as missing."""
    scenario = db.query(Scenario).filter(
        Scenario.id == scenario_id, Scenario.user_id == user.id
    ).first()
    if scenario is None:
        raise not_found("Scenario")
    return scenario


def get_owned_session(db: Session, session_id: UUID, user: User) -> GameSession:
    game_session = db.query(GameSession).filter(
        GameSession.id == session_id, GameSession.user_id == user.id
    ).first()
    if game_session is None:
        raise not_found("Session")
    return game_session


def field_error(field: str, message: str) -> HTTPException:
    """422 reported in the same shape as schema validation failures."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=[{"field": field, "message": message}],
    )


def get_scenario_child(db: Session, model: Type[M], obj_id: UUID, user: User, label: str) -> M:
    """Load a row that hangs off a scenario owned by ``user``."""
    obj = db.query(model).join(Scenario, model.scenario_id == Scenario.id).filter(
        model.id == obj_id, Scenario.user_id == user.id
    ).first()
    if obj is None:
        raise not_found(label)
    return obj


def get_session_child(db: Session, model: Type[M], obj_id: UUID, user: User, label: str) -> M:
    """Load a row that hangs off a session owned by ``user``."""
    obj = db.query(model).join(GameSession, model.session_id == GameSession.id).filter(
        model.id == obj_id, GameSession.user_id == user.id
    ).first()
    if obj is None:
        raise not_found(label)
    return obj
