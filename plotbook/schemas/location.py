from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from plotbook.schemas.base import CamelModel


class LocationCreate(CamelModel):
    name: str = Field(min_length=1)


class LocationUpdate(CamelModel):
    keep_if_falsy: ClassVar[frozenset[str]] = frozenset({"name"})

    name: Optional[str] = None


class LocationSummary(CamelModel):
    id: int
    name: str


class LocationRead(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
