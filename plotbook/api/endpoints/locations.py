from fastapi import APIRouter, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from plotbook.core.deps import DbSession
from plotbook.models.location import Location
from plotbook.models.plant import Plant
from plotbook.models.treatment import BugTreatment
from plotbook.schemas.location import LocationCreate, LocationRead, LocationUpdate
from plotbook.schemas.location_detail import LocationDetail, LocationListItem
from plotbook.schemas.plant import PlantSummary
from plotbook.schemas.treatment import BugTreatmentRead, BugTreatmentSummary
from plotbook.services.locations import delete_location_cascade
from plotbook.services.records import apply_update, get_or_404
from plotbook.services.treatments import get_latest_per_location

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationListItem])
async def list_locations(db: DbSession):
    result = await db.execute(select(Location).options(selectinload(Location.plants)).order_by(Location.id))
    locations = result.scalars().all()
    latest = {t.location_id: t for t in await get_latest_per_location(db)}
    return [
        LocationListItem(
            id=location.id,
            name=location.name,
            created_at=location.created_at,
            updated_at=location.updated_at,
            plants=[PlantSummary.model_validate(p) for p in location.plants],
            bug_treatments=(
                [BugTreatmentSummary.model_validate(latest[location.id])] if location.id in latest else []
            ),
        )
        for location in locations
    ]


@router.post("/new", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
async def create_location(data: LocationCreate, db: DbSession):
    location = Location(**data.model_dump())
    db.add(location)
    await db.commit()
    await db.refresh(location)
    return location


@router.get("/{location_id}", response_model=LocationDetail)
async def get_location(location_id: int, db: DbSession):
    return await get_or_404(
        db,
        Location,
        location_id,
        "Location",
        options=(
            selectinload(Location.plants).selectinload(Plant.vegetables),
            selectinload(Location.bug_treatments),
        ),
    )


@router.get("/{location_id}/bug-treatments", response_model=list[BugTreatmentRead])
async def list_location_bug_treatments(location_id: int, db: DbSession):
    await get_or_404(db, Location, location_id, "Location")
    result = await db.execute(
        select(BugTreatment)
        .where(BugTreatment.location_id == location_id)
        .order_by(BugTreatment.date.desc(), BugTreatment.id.desc())
    )
    return result.scalars().all()


@router.post("/{location_id}/edit", response_model=LocationRead)
async def update_location(location_id: int, data: LocationUpdate, db: DbSession):
    location = await get_or_404(db, Location, location_id, "Location")
    apply_update(location, data)
    await db.commit()
    await db.refresh(location)
    return location


@router.post("/{location_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(location_id: int, db: DbSession):
    location = await get_or_404(
        db,
        Location,
        location_id,
        "Location",
        options=(
            selectinload(Location.plants).selectinload(Plant.vegetables),
            selectinload(Location.bug_treatments),
        ),
    )
    await delete_location_cascade(db, location)
