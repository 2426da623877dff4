# backend/gmassist/services/importer.py
import logging
from typing import List, Dict, Any, Tuple
from uuid import UUID, uuid4

from pydantic import ValidationError
from sqlalchemy.orm import Session

from gmassist.models.region import Region
from gmassist.models.scenario import Scenario
from gmassist.models.user import User
from gmassist.schemas.region import RegionCreate
from gmassist.schemas.scenario import ScenarioCreate
from gmassist.services.exceptions import ImportValidationError
from gmassist.services.spreadsheet import (
    WorkbookMapper, SCENARIOS_SHEET, REGIONS_SHEET, optional_uuid,
)

logger = logging.getLogger(__name__)

# Columns that describe a row's identity rather than its content
SERVER_COLUMNS = ("id", "userId", "createdAt", "updatedAt")


def _format_errors(sheet: str, row_number: int, exc: ValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "row"
        messages.append(f"{sheet} row {row_number}: {field}: {error['msg']}")
    return messages


class ScenarioImporter:
    """Validates a parsed workbook and imports it in a single transaction.

    Every row is validated before anything is written. If any row fails,
    ImportValidationError is raised with one message per failure and the
    database is left untouched.
    """

    def __init__(self, db: Session, user: User, mapper: WorkbookMapper = None):
        self.db = db
        self.user = user
        self.mapper = mapper or WorkbookMapper()

    def import_workbook(self, content: bytes) -> Dict[str, int]:
        scenario_rows, region_rows = self.mapper.parse(content)
        errors: List[str] = []

        scenarios, id_map = self._build_scenarios(scenario_rows, errors)
        regions = self._build_regions(region_rows, id_map, errors)

        if errors:
            logger.warning(f"Import by {self.user.username} rejected: {len(errors)} invalid row(s)")
            raise ImportValidationError(errors)

        try:
            self.db.add_all(scenarios)
            self.db.flush()
            self.db.add_all(regions)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Imported {len(scenarios)} scenarios and {len(regions)} regions for {self.user.username}"
        )
        return {"scenarios": len(scenarios), "regions": len(regions)}

    def _build_scenarios(
        self, rows: List[Tuple[int, Dict[str, Any]]], errors: List[str]
    ) -> Tuple[List[Scenario], Dict[str, UUID]]:
        scenarios = []
        id_map: Dict[str, UUID] = {}
        for row_number, record in rows:
            payload = {k: v for k, v in record.items() if k not in SERVER_COLUMNS}
            try:
                data = ScenarioCreate.model_validate(payload)
            except ValidationError as e:
                errors.extend(_format_errors(SCENARIOS_SHEET, row_number, e))
                continue

            new_id = uuid4()
            if record.get("id"):
                id_map[record["id"]] = new_id
            scenarios.append(Scenario(id=new_id, user_id=self.user.id, **data.model_dump()))
        return scenarios, id_map

    def _resolve_scenario(self, original: Any, id_map: Dict[str, UUID]):
        if original is None:
            return None
        if original in id_map:
            return id_map[original]
        existing_id = optional_uuid(original)
        if existing_id is None:
            return None
        owned = self.db.query(Scenario.id).filter(
            Scenario.id == existing_id, Scenario.user_id == self.user.id
        ).first()
        return existing_id if owned else None

    def _build_regions(
        self, rows: List[Tuple[int, Dict[str, Any]]], id_map: Dict[str, UUID], errors: List[str]
    ) -> List[Region]:
        pending = []
        region_ids: Dict[str, UUID] = {}
        for row_number, record in rows:
            original_scenario = record.get("scenarioId")
            payload = {k: v for k, v in record.items() if k not in SERVER_COLUMNS}
            scenario_id = self._resolve_scenario(original_scenario, id_map)
            if original_scenario is not None and scenario_id is None:
                errors.append(
                    f"{REGIONS_SHEET} row {row_number}: scenarioId: "
                    f"unknown scenario '{original_scenario}'"
                )
                continue
            if scenario_id is not None:
                payload["scenarioId"] = scenario_id

            try:
                data = RegionCreate.model_validate(payload)
            except ValidationError as e:
                errors.extend(_format_errors(REGIONS_SHEET, row_number, e))
                continue

            new_id = uuid4()
            if record.get("id"):
                region_ids[record["id"]] = new_id
            pending.append((new_id, data))

        regions = []
        for new_id, data in pending:
            values = data.model_dump()
            if values.get("trade_routes"):
                values["trade_routes"] = [
                    str(region_ids[route]) if route in region_ids else route
                    for route in values["trade_routes"]
                ]
            regions.append(Region(id=new_id, **values))
        return regions
