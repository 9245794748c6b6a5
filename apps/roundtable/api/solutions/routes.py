from __future__ import annotations

from fastapi import APIRouter, Depends

from roundtable.core.dependencies import get_solution_manifest
from roundtable.schemas.solutions import SolutionManifest

router = APIRouter(prefix="/api/solution-manifest", tags=["solutions"])


@router.get("", response_model=SolutionManifest)
def solution_manifest(
    manifest: SolutionManifest = Depends(get_solution_manifest),
) -> SolutionManifest:
    return manifest
