# backend/gmassist/schemas/import_export.py
from typing import Optional, List

from gmassist.schemas.base import CamelModel


class ImportCounts(CamelModel):
    scenarios: int = 0
    regions: int = 0


class ImportResult(CamelModel):
    success: bool
    imported: ImportCounts
    message: Optional[str] = None
    details: Optional[List[str]] = None
