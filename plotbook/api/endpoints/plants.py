from fastapi import APIRouter, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from plotbook.core.deps import DbSession
from plotbook.models.location import Location
from plotbook.models.plant import Plant, Vegetable
from plotbook.schemas.plant import PlantCreate, PlantDetail, PlantRead, PlantUpdate, VegetableRead
from plotbook.services.records import apply_update, ensure_exists, get_or_404

router = APIRouter(prefix="/plants", tags=["plants"])

_DETAIL_OPTIONS = (selectinload(Plant.location), selectinload(Plant.vegetables))


@router.get("", response_model=list[PlantDetail])
async def list_plants(db: DbSession):
    result = await db.execute(select(Plant).options(*_DETAIL_OPTIONS).order_by(Plant.id))
    return result.scalars().all()


@router.post("/new", response_model=PlantRead, status_code=status.HTTP_201_CREATED)
async def create_plant(data: PlantCreate, db: DbSession):
    await ensure_exists(db, Location, data.location_id, "Location")
    plant = Plant(**data.model_dump())
    db.add(plant)
    await db.commit()
    await db.refresh(plant)
    return plant


@router.get("/{plant_id}", response_model=PlantDetail)
async def get_plant(plant_id: int, db: DbSession):
    return await get_or_404(db, Plant, plant_id, "Plant", options=_DETAIL_OPTIONS)


@router.get("/{plant_id}/vegetables", response_model=list[VegetableRead])
async def list_plant_vegetables(plant_id: int, db: DbSession):
    await get_or_404(db, Plant, plant_id, "Plant")
    result = await db.execute(
        select(Vegetable)
        .where(Vegetable.plant_id == plant_id)
        .order_by(Vegetable.harvested_at.desc(), Vegetable.id.desc())
    )
    return result.scalars().all()


@router.post("/{plant_id}/edit", response_model=PlantRead)
async def update_plant(plant_id: int, data: PlantUpdate, db: DbSession):
    plant = await get_or_404(db, Plant, plant_id, "Plant")
    if "location_id" in data.model_fields_set:
        await ensure_exists(db, Location, data.location_id, "Location")
    apply_update(plant, data)
    await db.commit()
    await db.refresh(plant)
    return plant


@router.post("/{plant_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plant(plant_id: int, db: DbSession):
    plant = await get_or_404(db, Plant, plant_id, "Plant", options=(selectinload(Plant.vegetables),))
    await db.delete(plant)
    await db.commit()
