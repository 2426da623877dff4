# backend/gmassist/api/nodes.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy.orm import Session

from gmassist.api.deps import (
    DBSession, CurrentUser, get_owned_session, get_session_child, not_found,
)
from gmassist.models.node import Node, Connection
from gmassist.schemas.node import (
    NodeCreate, NodeUpdate, NodeResponse,
    ConnectionCreate, ConnectionUpdate, ConnectionResponse,
)

router = APIRouter(tags=["Nodes"])


def _session_node(db: Session, session_id: UUID, node_id: UUID) -> Node:
    node = db.query(Node).filter(Node.id == node_id, Node.session_id == session_id).first()
    if not node:
        raise not_found("Node")
    return node


# Nodes

@router.get("/sessions/{session_id}/nodes", response_model=List[NodeResponse])
def list_nodes(session_id: UUID, db: DBSession, current_user: CurrentUser):
    game_session = get_owned_session(db, session_id, current_user)
    return db.query(Node).filter(Node.session_id == game_session.id).order_by(Node.created_at).all()


@router.post("/nodes", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
def create_node(node_data: NodeCreate, db: DBSession, current_user: CurrentUser):
    get_owned_session(db, node_data.session_id, current_user)

    node = Node(**node_data.model_dump())
    db.add(node)
    db.commit()
    db.refresh(node)
    return node


@router.get("/nodes/{node_id}", response_model=NodeResponse)
def get_node(node_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_session_child(db, Node, node_id, current_user, "Node")


@router.patch("/nodes/{node_id}", response_model=NodeResponse)
def update_node(node_id: UUID, node_data: NodeUpdate, db: DBSession, current_user: CurrentUser):
    node = get_session_child(db, Node, node_id, current_user, "Node")

    update_data = node_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(node, field, value)

    db.commit()
    db.refresh(node)
    return node


@router.delete("/nodes/{node_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_node(node_id: UUID, db: DBSession, current_user: CurrentUser):
    """Delete a node and every connection touching it"""
    node = get_session_child(db, Node, node_id, current_user, "Node")
    db.delete(node)
    db.commit()


# Connections

@router.get("/sessions/{session_id}/connections", response_model=List[ConnectionResponse])
def list_connections(session_id: UUID, db: DBSession, current_user: CurrentUser):
    game_session = get_owned_session(db, session_id, current_user)
    return db.query(Connection).filter(
        Connection.session_id == game_session.id
    ).order_by(Connection.created_at).all()


@router.post("/connections", response_model=ConnectionResponse, status_code=status.HTTP_201_CREATED)
def create_connection(connection_data: ConnectionCreate, db: DBSession, current_user: CurrentUser):
    game_session = get_owned_session(db, connection_data.session_id, current_user)
    # Both ends must sit on this session's board
    _session_node(db, game_session.id, connection_data.from_node_id)
    _session_node(db, game_session.id, connection_data.to_node_id)

    connection = Connection(**connection_data.model_dump())
    db.add(connection)
    db.commit()
    db.refresh(connection)
    return connection


@router.get("/connections/{connection_id}", response_model=ConnectionResponse)
def get_connection(connection_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_session_child(db, Connection, connection_id, current_user, "Connection")


@router.patch("/connections/{connection_id}", response_model=ConnectionResponse)
def update_connection(
    connection_id: UUID,
    connection_data: ConnectionUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    connection = get_session_child(db, Connection, connection_id, current_user, "Connection")

    update_data = connection_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(connection, field, value)

    db.commit()
    db.refresh(connection)
    return connection


@router.delete("/connections/{connection_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_connection(connection_id: UUID, db: DBSession, current_user: CurrentUser):
    connection = get_session_child(db, Connection, connection_id, current_user, "Connection")
    db.delete(connection)
    db.commit()
