from fastapi import APIRouter, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from plotbook.core.deps import DbSession
from plotbook.models.location import Location
from plotbook.models.treatment import BugTreatment
from plotbook.schemas.treatment import (
    BugTreatmentCreate,
    BugTreatmentDetail,
    BugTreatmentRead,
    BugTreatmentUpdate,
    RecentBugTreatment,
)
from plotbook.services.records import apply_update, ensure_exists, get_or_404
from plotbook.services.treatments import get_latest_per_location

router = APIRouter(prefix="/bug-treatments", tags=["bug-treatments"])


@router.get("", response_model=list[BugTreatmentDetail])
async def list_bug_treatments(db: DbSession):
    result = await db.execute(
        select(BugTreatment)
        .options(selectinload(BugTreatment.location))
        .order_by(BugTreatment.date.desc(), BugTreatment.id.desc())
    )
    return result.scalars().all()


# Registered before /{treatment_id} so "recent" is not read as an id
@router.get("/recent", response_model=list[RecentBugTreatment])
async def list_recent_bug_treatments(db: DbSession):
    return await get_latest_per_location(db)


@router.post("/new", response_model=BugTreatmentRead, status_code=status.HTTP_201_CREATED)
async def create_bug_treatment(data: BugTreatmentCreate, db: DbSession):
    await ensure_exists(db, Location, data.location_id, "Location")
    treatment = BugTreatment(**data.model_dump())
    db.add(treatment)
    await db.commit()
    await db.refresh(treatment)
    return treatment


@router.get("/{treatment_id}", response_model=BugTreatmentDetail)
async def get_bug_treatment(treatment_id: int, db: DbSession):
    return await get_or_404(
        db, BugTreatment, treatment_id, "Bug treatment", options=(selectinload(BugTreatment.location),)
    )


@router.post("/{treatment_id}/edit", response_model=BugTreatmentRead)
async def update_bug_treatment(treatment_id: int, data: BugTreatmentUpdate, db: DbSession):
    treatment = await get_or_404(db, BugTreatment, treatment_id, "Bug treatment")
    if "location_id" in data.model_fields_set:
        await ensure_exists(db, Location, data.location_id, "Location")
    apply_update(treatment, data)
    await db.commit()
    await db.refresh(treatment)
    return treatment


@router.post("/{treatment_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bug_treatment(treatment_id: int, db: DbSession):
    treatment = await get_or_404(db, BugTreatment, treatment_id, "Bug treatment")
    await db.delete(treatment)
    await db.commit()
