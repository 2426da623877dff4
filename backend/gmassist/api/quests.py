# backend/gmassist/api/quests.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Query, status

from gmassist.api.deps import DBSession, CurrentUser, get_owned_scenario, get_scenario_child
from gmassist.models.quest import ScenarioQuest
from gmassist.schemas.quest import QuestCreate, QuestUpdate, QuestResponse

router = APIRouter(prefix="/quests", tags=["Quests"])


@router.get("", response_model=List[QuestResponse])
def list_quests(
    db: DBSession,
    current_user: CurrentUser,
    scenario_id: UUID = Query(..., alias="scenarioId"),
):
    scenario = get_owned_scenario(db, scenario_id, current_user)
    return db.query(ScenarioQuest).filter(
        ScenarioQuest.scenario_id == scenario.id
    ).order_by(ScenarioQuest.created_at).all()


@router.post("", response_model=QuestResponse, status_code=status.HTTP_201_CREATED)
def create_quest(quest_data: QuestCreate, db: DBSession, current_user: CurrentUser):
    get_owned_scenario(db, quest_data.scenario_id, current_user)

    quest = ScenarioQuest(**quest_data.model_dump())
    db.add(quest)
    db.commit()
    db.refresh(quest)
    return quest


@router.get("/{quest_id}", response_model=QuestResponse)
def get_quest(quest_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_scenario_child(db, ScenarioQuest, quest_id, current_user, "Quest")


@router.patch("/{quest_id}", response_model=QuestResponse)
def update_quest(quest_id: UUID, quest_data: QuestUpdate, db: DBSession, current_user: CurrentUser):
    quest = get_scenario_child(db, ScenarioQuest, quest_id, current_user, "Quest")

    update_data = quest_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(quest, field, value)

    db.commit()
    db.refresh(quest)
    return quest


@router.delete("/{quest_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quest(quest_id: UUID, db: DBSession, current_user: CurrentUser):
    quest = get_scenario_child(db, ScenarioQuest, quest_id, current_user, "Quest")
    db.delete(quest)
    db.commit()
