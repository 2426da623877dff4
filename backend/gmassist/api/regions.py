# backend/gmassist/api/regions.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy.orm import Session

from gmassist.api.deps import DBSession, CurrentUser, get_owned_scenario, get_scenario_child
from gmassist.models.condition import EnvironmentalCondition
from gmassist.models.region import Region
from gmassist.schemas.region import RegionCreate, RegionUpdate, RegionResponse
from gmassist.services.seeding import list_regions as list_scenario_regions
from gmassist.services.spreadsheet import optional_uuid

router = APIRouter(prefix="/regions", tags=["Regions"])


def _without(ids: Optional[List[str]], region_id: UUID) -> Optional[List[str]]:
    if not ids:
        return ids
    return [value for value in ids if optional_uuid(value) != region_id]


def _drop_references(db: Session, region: Region) -> None:
    # JSON lists are reassigned so the change is flushed
    for other in db.query(Region).filter(
        Region.scenario_id == region.scenario_id, Region.id != region.id
    ).all():
        routes = _without(other.trade_routes, region.id)
        if routes != other.trade_routes:
            other.trade_routes = routes

    for condition in db.query(EnvironmentalCondition).filter(
        EnvironmentalCondition.scenario_id == region.scenario_id
    ).all():
        affected = _without(condition.affected_regions, region.id)
        if affected != condition.affected_regions:
            condition.affected_regions = affected


@router.get("", response_model=List[RegionResponse])
def list_regions(
    db: DBSession,
    current_user: CurrentUser,
    scenario_id: UUID = Query(..., alias="scenarioId"),
):
    """List all regions in a scenario"""
    scenario = get_owned_scenario(db, scenario_id, current_user)
    return list_scenario_regions(db, scenario.id)


@router.post("", response_model=RegionResponse, status_code=status.HTTP_201_CREATED)
def create_region(region_data: RegionCreate, db: DBSession, current_user: CurrentUser):
    get_owned_scenario(db, region_data.scenario_id, current_user)

    region = Region(**region_data.model_dump())
    db.add(region)
    db.commit()
    db.refresh(region)
    return region


@router.get("/{region_id}", response_model=RegionResponse)
def get_region(region_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_scenario_child(db, Region, region_id, current_user, "Region")


@router.patch("/{region_id}", response_model=RegionResponse)
def update_region(
    region_id: UUID,
    region_data: RegionUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    region = get_scenario_child(db, Region, region_id, current_user, "Region")

    update_data = region_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(region, field, value)

    db.commit()
    db.refresh(region)
    return region


@router.delete("/{region_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_region(region_id: UUID, db: DBSession, current_user: CurrentUser):
    """Delete a region and drop it from trade routes and affected regions of its scenario"""
    region = get_scenario_child(db, Region, region_id, current_user, "Region")
    _drop_references(db, region)
    db.delete(region)
    db.commit()
