# backend/gmassist/services/exceptions.py
from typing import List


class UpstreamError(Exception):
    """The text-generation collaborator failed, timed out or replied with garbage."""


class AIUnavailableError(Exception):
    """No text-generation collaborator is configured."""


class SpreadsheetError(IOError):
    """The uploaded workbook could not be read."""


class ImportValidationError(Exception):
    """One or more workbook rows failed validation; nothing was imported."""

    MAX_DETAILS = 5

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"{len(errors)} row(s) failed validation")

    @property
    def details(self) -> List[str]:
        shown = self.errors[:self.MAX_DETAILS]
        remaining = len(self.errors) - len(shown)
        if remaining > 0:
            shown = shown + [f"... and {remaining} more errors"]
        return shown
