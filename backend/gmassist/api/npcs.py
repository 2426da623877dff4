# backend/gmassist/api/npcs.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Query, status

from gmassist.api.deps import DBSession, CurrentUser, get_owned_scenario, get_scenario_child
from gmassist.models.npc import ScenarioNPC
from gmassist.schemas.npc import NPCCreate, NPCUpdate, NPCResponse

router = APIRouter(prefix="/npcs", tags=["NPCs"])


@router.get("", response_model=List[NPCResponse])
def list_npcs(
    db: DBSession,
    current_user: CurrentUser,
    scenario_id: UUID = Query(..., alias="scenarioId"),
):
    scenario = get_owned_scenario(db, scenario_id, current_user)
    return db.query(ScenarioNPC).filter(
        ScenarioNPC.scenario_id == scenario.id
    ).order_by(ScenarioNPC.created_at).all()


@router.post("", response_model=NPCResponse, status_code=status.HTTP_201_CREATED)
def create_npc(npc_data: NPCCreate, db: DBSession, current_user: CurrentUser):
    get_owned_scenario(db, npc_data.scenario_id, current_user)

    npc = ScenarioNPC(**npc_data.model_dump())
    db.add(npc)
    db.commit()
    db.refresh(npc)
    return npc


@router.get("/{npc_id}", response_model=NPCResponse)
def get_npc(npc_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_scenario_child(db, ScenarioNPC, npc_id, current_user, "NPC")


@router.patch("/{npc_id}", response_model=NPCResponse)
def update_npc(npc_id: UUID, npc_data: NPCUpdate, db: DBSession, current_user: CurrentUser):
    npc = get_scenario_child(db, ScenarioNPC, npc_id, current_user, "NPC")

    update_data = npc_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(npc, field, value)

    db.commit()
    db.refresh(npc)
    return npc


@router.delete("/{npc_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_npc(npc_id: UUID, db: DBSession, current_user: CurrentUser):
    npc = get_scenario_child(db, ScenarioNPC, npc_id, current_user, "NPC")
    db.delete(npc)
    db.commit()
