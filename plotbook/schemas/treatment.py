from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from plotbook.schemas.base import CamelModel, LocalDateTime
from plotbook.schemas.location import LocationRead, LocationSummary


class BugTreatmentCreate(CamelModel):
    type: str = Field(min_length=1)
    date: LocalDateTime
    # Required key, but an explicit null is accepted
    location_id: Optional[int]


class BugTreatmentUpdate(CamelModel):
    keep_if_falsy: ClassVar[frozenset[str]] = frozenset({"type", "date"})

    type: Optional[str] = None
    date: Optional[LocalDateTime] = None
    location_id: Optional[int] = None


class BugTreatmentSummary(CamelModel):
    id: int
    type: str
    date: datetime


class BugTreatmentRead(CamelModel):
    id: int
    type: str
    date: datetime
    location_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class BugTreatmentDetail(BugTreatmentRead):
    location: Optional[LocationRead] = Field(default=None, alias="Location")


class RecentBugTreatment(BugTreatmentRead):
    location: LocationSummary = Field(alias="Location")
