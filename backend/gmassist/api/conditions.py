# backend/gmassist/api/conditions.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy.orm import Session

from gmassist.api.deps import (
    DBSession, CurrentUser, get_owned_scenario, get_scenario_child, field_error,
)
from gmassist.models.condition import EnvironmentalCondition
from gmassist.models.region import Region
from gmassist.schemas.condition import ConditionCreate, ConditionUpdate, ConditionResponse
from gmassist.services.spreadsheet import optional_uuid

router = APIRouter(prefix="/conditions", tags=["Conditions"])


def _check_affected_regions(db: Session, scenario_id: UUID, region_ids: Optional[List[str]]) -> None:
    if not region_ids:
        return
    known = {
        str(region_id) for (region_id,) in
        db.query(Region.id).filter(Region.scenario_id == scenario_id).all()
    }
    unknown = [r for r in region_ids if str(optional_uuid(r)) not in known]
    if unknown:
        raise field_error(
            "affectedRegions",
            f"Regions not found in this scenario: {', '.join(unknown)}",
        )


@router.get("", response_model=List[ConditionResponse])
def list_conditions(
    db: DBSession,
    current_user: CurrentUser,
    scenario_id: UUID = Query(..., alias="scenarioId"),
):
    scenario = get_owned_scenario(db, scenario_id, current_user)
    return db.query(EnvironmentalCondition).filter(
        EnvironmentalCondition.scenario_id == scenario.id
    ).order_by(EnvironmentalCondition.created_at).all()


@router.post("", response_model=ConditionResponse, status_code=status.HTTP_201_CREATED)
def create_condition(condition_data: ConditionCreate, db: DBSession, current_user: CurrentUser):
    scenario = get_owned_scenario(db, condition_data.scenario_id, current_user)
    _check_affected_regions(db, scenario.id, condition_data.affected_regions)

    condition = EnvironmentalCondition(**condition_data.model_dump())
    db.add(condition)
    db.commit()
    db.refresh(condition)
    return condition


@router.get("/{condition_id}", response_model=ConditionResponse)
def get_condition(condition_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_scenario_child(db, EnvironmentalCondition, condition_id, current_user, "Condition")


@router.patch("/{condition_id}", response_model=ConditionResponse)
def update_condition(
    condition_id: UUID,
    condition_data: ConditionUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    condition = get_scenario_child(db, EnvironmentalCondition, condition_id, current_user, "Condition")

    update_data = condition_data.model_dump(exclude_unset=True)
    if "affected_regions" in update_data:
        _check_affected_regions(db, condition.scenario_id, update_data["affected_regions"])
    for field, value in update_data.items():
        setattr(condition, field, value)

    db.commit()
    db.refresh(condition)
    return condition


@router.delete("/{condition_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_condition(condition_id: UUID, db: DBSession, current_user: CurrentUser):
    condition = get_scenario_child(db, EnvironmentalCondition, condition_id, current_user, "Condition")
    db.delete(condition)
    db.commit()
