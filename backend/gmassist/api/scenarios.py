# backend/gmassist/api/scenarios.py
import io
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Response, UploadFile, File, status
from fastapi.responses import JSONResponse, StreamingResponse
from sqlalchemy import or_

from gmassist.api.deps import (
    DBSession, CurrentUser, get_owned_scenario, get_owned_session,
)
from gmassist.models.condition import EnvironmentalCondition
from gmassist.models.npc import ScenarioNPC
from gmassist.models.quest import ScenarioQuest
from gmassist.models.region import Region
from gmassist.models.scenario import Scenario, ScenarioSession
from gmassist.models.session import GameSession
from gmassist.schemas.import_export import ImportResult, ImportCounts
from gmassist.schemas.region import RegionResponse
from gmassist.schemas.scenario import (
    ScenarioCreate, ScenarioUpdate, ScenarioResponse, ScenarioSessionResponse,
)
from gmassist.schemas.search import ScenarioSearchResult
from gmassist.schemas.session import SessionResponse
from gmassist.services.exceptions import ImportValidationError
from gmassist.services.importer import ScenarioImporter
from gmassist.services.seeding import seed_default_regions
from gmassist.services.spreadsheet import WorkbookMapper

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scenarios", tags=["Scenarios"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("", response_model=List[ScenarioResponse])
def list_scenarios(db: DBSession, current_user: CurrentUser):
    """List the current user's scenarios, most recently updated first"""
    return db.query(Scenario).filter(
        Scenario.user_id == current_user.id
    ).order_by(Scenario.updated_at.desc()).all()


@router.post("", response_model=ScenarioResponse, status_code=status.HTTP_201_CREATED)
def create_scenario(
    scenario_data: ScenarioCreate,
    db: DBSession,
    current_user: CurrentUser,
    seed_defaults: bool = Query(True, alias="seedDefaults"),
):
    scenario = Scenario(user_id=current_user.id, **scenario_data.model_dump())
    db.add(scenario)
    db.flush()

    if seed_defaults:
        seed_default_regions(db, scenario)

    db.commit()
    db.refresh(scenario)
    logger.info(f"Created scenario {scenario.id} for {current_user.username}")
    return scenario


@router.get("/export")
def export_scenarios(
    db: DBSession,
    current_user: CurrentUser,
    user_id: Optional[UUID] = Query(None, alias="userId"),
):
    """Download every scenario of the user and their regions as an xlsx workbook."""
    if user_id is not None and user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Can only export your own scenarios",
        )

    scenarios = db.query(Scenario).filter(
        Scenario.user_id == current_user.id
    ).order_by(Scenario.created_at).all()
    scenario_ids = [s.id for s in scenarios]
    regions = []
    if scenario_ids:
        regions = db.query(Region).filter(
            Region.scenario_id.in_(scenario_ids)
        ).order_by(Region.created_at).all()

    content = WorkbookMapper().export(scenarios, regions)
    filename = f"scenarios-{datetime.now(timezone.utc):%Y%m%d-%H%M%S}.xlsx"
    logger.info(f"Exported {len(scenarios)} scenarios and {len(regions)} regions for {current_user.username}")
    return StreamingResponse(
        io.BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post("/import", response_model=ImportResult)
async def import_scenarios(
    db: DBSession,
    current_user: CurrentUser,
    file: UploadFile = File(...),
):
    """Import a workbook produced by the export. All rows are imported or none are."""
    content = await file.read()
    importer = ScenarioImporter(db, current_user)
    try:
        counts = importer.import_workbook(content)
    except ImportValidationError as e:
        result = ImportResult(
            success=False,
            imported=ImportCounts(),
            message=f"Import failed: {len(e.errors)} invalid row(s), nothing was imported",
            details=e.details,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=result.model_dump(mode="json", by_alias=True),
        )

    return ImportResult(success=True, imported=ImportCounts(**counts))


@router.get("/{scenario_id}", response_model=ScenarioResponse)
def get_scenario(scenario_id: UUID, db: DBSession, current_user: CurrentUser):
    return get_owned_scenario(db, scenario_id, current_user)


@router.patch("/{scenario_id}", response_model=ScenarioResponse)
def update_scenario(
    scenario_id: UUID,
    scenario_data: ScenarioUpdate,
    db: DBSession,
    current_user: CurrentUser,
):
    scenario = get_owned_scenario(db, scenario_id, current_user)

    update_data = scenario_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(scenario, field, value)

    db.commit()
    db.refresh(scenario)
    return scenario


@router.delete("/{scenario_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_scenario(scenario_id: UUID, db: DBSession, current_user: CurrentUser):
    """Delete a scenario together with its regions, NPCs, quests, conditions and links"""
    scenario = get_owned_scenario(db, scenario_id, current_user)
    db.delete(scenario)
    db.commit()
    logger.info(f"Deleted scenario {scenario_id}")


@router.post("/{scenario_id}/regions/seed-defaults", response_model=List[RegionResponse])
def seed_regions(scenario_id: UUID, response: Response, db: DBSession, current_user: CurrentUser):
    """Add the ten default regions to a scenario without regions.

    A scenario that already has regions is left as is and its regions are returned.
    """
    scenario = get_owned_scenario(db, scenario_id, current_user)
    regions, created = seed_default_regions(db, scenario)
    if created:
        db.commit()
        response.status_code = status.HTTP_201_CREATED
    return regions


@router.get("/{scenario_id}/search", response_model=ScenarioSearchResult)
def search_scenario(
    scenario_id: UUID,
    db: DBSession,
    current_user: CurrentUser,
    q: str = Query(..., min_length=1, max_length=200),
):
    """Case-insensitive search over a scenario's regions, NPCs, quests and conditions"""
    scenario = get_owned_scenario(db, scenario_id, current_user)

    def matching(model, *columns):
        return db.query(model).filter(
            model.scenario_id == scenario.id,
            or_(*(column.icontains(q, autoescape=True) for column in columns)),
        ).order_by(model.created_at).all()

    return {
        "query": q,
        "regions": matching(Region, Region.name, Region.description, Region.controlling_faction),
        "npcs": matching(ScenarioNPC, ScenarioNPC.name, ScenarioNPC.role, ScenarioNPC.description),
        "quests": matching(ScenarioQuest, ScenarioQuest.title, ScenarioQuest.description),
        "conditions": matching(
            EnvironmentalCondition, EnvironmentalCondition.name, EnvironmentalCondition.description
        ),
    }


# Scenario-session links

@router.get("/{scenario_id}/sessions", response_model=List[SessionResponse])
def list_linked_sessions(scenario_id: UUID, db: DBSession, current_user: CurrentUser):
    scenario = get_owned_scenario(db, scenario_id, current_user)
    return db.query(GameSession).join(
        ScenarioSession, ScenarioSession.session_id == GameSession.id
    ).filter(
        ScenarioSession.scenario_id == scenario.id
    ).order_by(ScenarioSession.created_at).all()


@router.post(
    "/{scenario_id}/sessions/{session_id}",
    response_model=ScenarioSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
def link_session(
    scenario_id: UUID,
    session_id: UUID,
    response: Response,
    db: DBSession,
    current_user: CurrentUser,
):
    """Link a scenario to a session. Linking twice returns the existing link."""
    scenario = get_owned_scenario(db, scenario_id, current_user)
    game_session = get_owned_session(db, session_id, current_user)

    existing = db.query(ScenarioSession).filter(
        ScenarioSession.scenario_id == scenario.id,
        ScenarioSession.session_id == game_session.id,
    ).first()
    if existing:
        response.status_code = status.HTTP_200_OK
        return existing

    link = ScenarioSession(scenario_id=scenario.id, session_id=game_session.id)
    db.add(link)
    db.commit()
    db.refresh(link)
    return link


@router.delete("/{scenario_id}/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlink_session(scenario_id: UUID, session_id: UUID, db: DBSession, current_user: CurrentUser):
    scenario = get_owned_scenario(db, scenario_id, current_user)
    link = db.query(ScenarioSession).filter(
        ScenarioSession.scenario_id == scenario.id,
        ScenarioSession.session_id == session_id,
    ).first()
    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found",
        )
    db.delete(link)
    db.commit()
