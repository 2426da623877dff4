# backend/gmassist/api/entity_schemas.py
from typing import List

from fastapi import APIRouter, HTTPException, status

from gmassist.schemas.entity_schema import EntitySchema
from gmassist.services.entity_schema import ENTITY_KINDS, describe_kind

router = APIRouter(prefix="/entity-schemas", tags=["Entity Schemas"])


@router.get("", response_model=List[str])
def list_entity_kinds():
    return list(ENTITY_KINDS)


@router.get("/{kind}", response_model=EntitySchema)
def get_entity_schema(kind: str):
    """Field descriptors a generic editor can render for one entity kind"""
    if kind not in ENTITY_KINDS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown entity kind: {kind}",
        )
    return {"kind": kind, "fields": describe_kind(kind)}
