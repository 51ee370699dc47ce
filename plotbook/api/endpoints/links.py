"""Attach/detach endpoints: they only ever rewrite the child's foreign key."""
from fastapi import APIRouter

from plotbook.core.deps import DbSession
from plotbook.models.location import Location
from plotbook.models.plant import Plant
from plotbook.models.treatment import BugTreatment
from plotbook.schemas.links import (
    BugTreatmentLocationAttach,
    BugTreatmentLocationDetach,
    PlantLocationAttach,
    PlantLocationDetach,
)
from plotbook.schemas.plant import PlantRead
from plotbook.schemas.treatment import BugTreatmentRead
from plotbook.services.records import get_or_404

router = APIRouter(tags=["links"])


# ── Plant ↔ Location ──────────────────────────────────────────────────────────


@router.post("/attachPlantToLocation", response_model=PlantRead)
async def attach_plant_to_location(data: PlantLocationAttach, db: DbSession):
    plant = await get_or_404(db, Plant, data.plant_id, "Plant")
    location = await get_or_404(db, Location, data.location_id, "Location")
    plant.location_id = location.id
    await db.commit()
    await db.refresh(plant)
    return plant


@router.post("/detachPlantFromLocation", response_model=PlantRead)
async def detach_plant_from_location(data: PlantLocationDetach, db: DbSession):
    plant = await get_or_404(db, Plant, data.plant_id, "Plant")
    plant.location_id = None
    await db.commit()
    await db.refresh(plant)
    return plant


# ── BugTreatment ↔ Location ───────────────────────────────────────────────────


@router.post("/attachBugTreatmentToLocation", response_model=BugTreatmentRead)
async def attach_bug_treatment_to_location(data: BugTreatmentLocationAttach, db: DbSession):
    treatment = await get_or_404(db, BugTreatment, data.bug_treatment_id, "Bug treatment")
    location = await get_or_404(db, Location, data.location_id, "Location")
    treatment.location_id = location.id
    await db.commit()
    await db.refresh(treatment)
    return treatment


@router.post("/detachBugTreatmentFromLocation", response_model=BugTreatmentRead)
async def detach_bug_treatment_from_location(data: BugTreatmentLocationDetach, db: DbSession):
    treatment = await get_or_404(db, BugTreatment, data.bug_treatment_id, "Bug treatment")
    treatment.location_id = None
    await db.commit()
    await db.refresh(treatment)
    return treatment
