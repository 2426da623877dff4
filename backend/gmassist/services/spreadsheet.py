# backend/gmassist/services/spreadsheet.py
import io
import logging
import re
from datetime import datetime
from enum import Enum
from typing import List, Dict, Any, Iterable, Optional, Tuple
from uuid import UUID
from xml.etree.ElementTree import ParseError
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from gmassist.services.exceptions import SpreadsheetError

logger = logging.getLogger(__name__)

SCENARIOS_SHEET = "Scenarios"
REGIONS_SHEET = "Regions"

# (column header, model attribute, kind)
SCENARIO_COLUMNS = [
    ("id", "id", "text"),
    ("title", "title", "text"),
    ("mainIdea", "main_idea", "text"),
    ("worldContext", "world_context", "text"),
    ("politicalSituation", "political_situation", "text"),
    ("keyThemes", "key_themes", "list"),
    ("status", "status", "text"),
    ("userId", "user_id", "text"),
    ("createdAt", "created_at", "text"),
    ("updatedAt", "updated_at", "text"),
]

REGION_COLUMNS = [
    ("id", "id", "text"),
    ("scenarioId", "scenario_id", "text"),
    ("name", "name", "text"),
    ("type", "type", "text"),
    ("description", "description", "text"),
    ("controllingFaction", "controlling_faction", "text"),
    ("population", "population", "number"),
    ("resources", "resources", "list"),
    ("threatLevel", "threat_level", "number"),
    ("politicalStance", "political_stance", "text"),
    ("tradeRoutes", "trade_routes", "list"),
    ("createdAt", "created_at", "text"),
]

LIST_SEPARATOR = ", "


def normalize_header(value: Any) -> str:
    """'Main Idea', 'main_idea' and 'mainIdea' all become 'mainidea'."""
    return re.sub(r"[\s_]+", "", str(value)).lower()


def _cell_value(value: Any, kind: str) -> Any:
    if value is None:
        return None
    if kind == "list":
        return LIST_SEPARATOR.join(str(v) for v in value) if value else None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    return value


def _row_value(value: Any, kind: str) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    if kind == "list":
        items = [item.strip() for item in str(value).split(LIST_SEPARATOR)]
        return [item for item in items if item] or None
    if kind == "text":
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
    return value


class WorkbookMapper:
    """Maps scenario and region rows to and from a two-sheet xlsx workbook."""

    def export(self, scenarios: Iterable[Any], regions: Iterable[Any]) -> bytes:
        workbook = Workbook()
        scenario_sheet = workbook.active
        scenario_sheet.title = SCENARIOS_SHEET
        self._write_sheet(scenario_sheet, SCENARIO_COLUMNS, scenarios)

        region_sheet = workbook.create_sheet(REGIONS_SHEET)
        self._write_sheet(region_sheet, REGION_COLUMNS, regions)

        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    def _write_sheet(self, sheet, columns, records: Iterable[Any]) -> None:
        sheet.append([header for header, _, _ in columns])
        for record in records:
            sheet.append([
                _cell_value(getattr(record, attr), kind) for _, attr, kind in columns
            ])
            # Text starting with "=" stays text, never a formula
            for cell in sheet[sheet.max_row]:
                if isinstance(cell.value, str) and cell.value.startswith("="):
                    cell.data_type = "s"

    def parse(self, content: bytes) -> Tuple[List[Tuple[int, Dict[str, Any]]], List[Tuple[int, Dict[str, Any]]]]:
        """Read both sheets into ``(row number, {column header: value})`` pairs.

        Values are cleaned (blank cells dropped, lists split) but not validated.
        """
        try:
            workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        except (InvalidFileException, BadZipFile, ParseError, KeyError, OSError, ValueError) as e:
            # Corrupt archives surface as zipfile or missing-member errors
            raise SpreadsheetError(f"Unable to read workbook: {e}") from e

        try:
            # Read-only sheets parse their XML while rows are iterated
            scenarios = self._read_sheet(workbook, SCENARIOS_SHEET, SCENARIO_COLUMNS)
            regions = self._read_sheet(workbook, REGIONS_SHEET, REGION_COLUMNS)
        except ParseError as e:
            raise SpreadsheetError(f"Unable to read workbook: {e}") from e
        finally:
            workbook.close()

        logger.info(f"Parsed workbook with {len(scenarios)} scenario and {len(regions)} region rows")
        return scenarios, regions

    def _find_sheet(self, workbook, name: str):
        for sheet_name in workbook.sheetnames:
            if normalize_header(sheet_name) == normalize_header(name):
                return workbook[sheet_name]
        raise SpreadsheetError(f"Workbook is missing the '{name}' sheet")

    def _read_sheet(self, workbook, name: str, columns) -> List[Tuple[int, Dict[str, Any]]]:
        sheet = self._find_sheet(workbook, name)
        rows = sheet.iter_rows(values_only=True)
        header_row = next(rows, None)
        if header_row is None:
            return []

        known = {normalize_header(header): (header, kind) for header, _, kind in columns}
        mapping: Dict[int, Tuple[str, str]] = {}
        for index, header in enumerate(header_row):
            if header is None:
                continue
            match = known.get(normalize_header(header))
            if match:
                mapping[index] = match

        records = []
        for row_number, row in enumerate(rows, start=2):
            if row is None or all(cell is None or str(cell).strip() == "" for cell in row):
                continue
            record: Dict[str, Any] = {}
            for index, (header, kind) in mapping.items():
                if index >= len(row):
                    continue
                value = _row_value(row[index], kind)
                if value is not None:
                    record[header] = value
            records.append((row_number, record))
        return records


def optional_uuid(value: Optional[str]) -> Optional[UUID]:
    if value is None:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None
