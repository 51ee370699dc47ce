from fastapi import APIRouter, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from plotbook.core.deps import DbSession
from plotbook.models.plant import Plant, Vegetable
from plotbook.schemas.plant import VegetableCreate, VegetableDetail, VegetableRead, VegetableUpdate
from plotbook.services.harvest import INVALID_PERIOD, get_monthly_harvest, parse_period
from plotbook.services.records import apply_update, ensure_exists, get_or_404

router = APIRouter(prefix="/vegetables", tags=["vegetables"])
harvest_router = APIRouter(prefix="/harvest", tags=["harvest"])


# ── Vegetables ────────────────────────────────────────────────────────────────


@router.get("", response_model=list[VegetableDetail])
async def list_vegetables(db: DbSession):
    result = await db.execute(
        select(Vegetable).options(selectinload(Vegetable.plant)).order_by(Vegetable.id)
    )
    return result.scalars().all()


@router.post("/new", response_model=VegetableRead, status_code=status.HTTP_201_CREATED)
async def create_vegetable(data: VegetableCreate, db: DbSession):
    await ensure_exists(db, Plant, data.plant_id, "Plant")
    vegetable = Vegetable(**data.model_dump())
    db.add(vegetable)
    await db.commit()
    await db.refresh(vegetable)
    return vegetable


@router.get("/{vegetable_id}", response_model=VegetableDetail)
async def get_vegetable(vegetable_id: int, db: DbSession):
    return await get_or_404(
        db, Vegetable, vegetable_id, "Vegetable", options=(selectinload(Vegetable.plant),)
    )


@router.post("/{vegetable_id}/edit", response_model=VegetableRead)
async def update_vegetable(vegetable_id: int, data: VegetableUpdate, db: DbSession):
    vegetable = await get_or_404(db, Vegetable, vegetable_id, "Vegetable")
    if data.plant_id:
        await ensure_exists(db, Plant, data.plant_id, "Plant")
    apply_update(vegetable, data)
    await db.commit()
    await db.refresh(vegetable)
    return vegetable


@router.post("/{vegetable_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vegetable(vegetable_id: int, db: DbSession):
    vegetable = await get_or_404(db, Vegetable, vegetable_id, "Vegetable")
    await db.delete(vegetable)
    await db.commit()


# ── Harvest report ────────────────────────────────────────────────────────────


@harvest_router.get("/{period}", response_model=list[VegetableDetail])
async def get_harvest(period: str, db: DbSession):
    parsed = parse_period(period)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PERIOD)
    month, year = parsed
    return await get_monthly_harvest(db, month, year)
