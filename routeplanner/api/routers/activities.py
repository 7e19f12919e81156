from fastapi import APIRouter

from routeplanner.core.activity_catalog import build_activity_catalog
from routeplanner.core.schemas import Activity, CatalogRequest

router = APIRouter(prefix="/activities", tags=["activities"])


@router.post("/catalog", response_model=list[Activity])
def get_activity_catalog(payload: CatalogRequest) -> list[Activity]:
    """Return template activities for a destination based on trip interests."""
    return build_activity_catalog(payload.destination, payload.interests)
