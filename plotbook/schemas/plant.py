from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from plotbook.schemas.base import CamelModel, LocalDateTime
from plotbook.schemas.location import LocationRead


# ── Plants ────────────────────────────────────────────────────────────────────


class PlantCreate(CamelModel):
    name: str = Field(min_length=1)
    planted_at: Optional[LocalDateTime] = None
    origin: Optional[str] = None
    icon: Optional[str] = None
    location_id: Optional[int] = None


class PlantUpdate(CamelModel):
    keep_if_falsy: ClassVar[frozenset[str]] = frozenset({"name", "planted_at", "origin", "icon"})

    name: Optional[str] = None
    planted_at: Optional[LocalDateTime] = None
    origin: Optional[str] = None
    icon: Optional[str] = None
    location_id: Optional[int] = None


class PlantSummary(CamelModel):
    id: int
    name: str


class PlantRead(CamelModel):
    id: int
    name: str
    planted_at: Optional[datetime] = None
    origin: Optional[str] = None
    icon: Optional[str] = None
    location_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


# ── Vegetables ────────────────────────────────────────────────────────────────


class VegetableCreate(CamelModel):
    plant_id: int
    rating: Optional[int] = None
    quantity: Optional[int] = None
    harvested_at: Optional[LocalDateTime] = None


class VegetableUpdate(CamelModel):
    keep_if_falsy: ClassVar[frozenset[str]] = frozenset({"harvested_at", "plant_id"})

    rating: Optional[int] = None
    quantity: Optional[int] = None
    harvested_at: Optional[LocalDateTime] = None
    plant_id: Optional[int] = None


class VegetableRead(CamelModel):
    id: int
    rating: Optional[int] = None
    quantity: Optional[int] = None
    harvested_at: Optional[datetime] = None
    plant_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


# ── Nested reads ──────────────────────────────────────────────────────────────


class PlantWithVegetables(PlantRead):
    vegetables: list[VegetableRead] = Field(default_factory=list, alias="Vegetables")


class PlantDetail(PlantWithVegetables):
    location: Optional[LocationRead] = Field(default=None, alias="Location")


class VegetableDetail(VegetableRead):
    plant: Optional[PlantRead] = Field(default=None, alias="Plant")
