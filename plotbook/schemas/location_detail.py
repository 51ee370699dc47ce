from pydantic import Field

from plotbook.schemas.location import LocationRead
from plotbook.schemas.plant import PlantSummary, PlantWithVegetables
from plotbook.schemas.treatment import BugTreatmentRead, BugTreatmentSummary


class LocationListItem(LocationRead):
    plants: list[PlantSummary] = Field(default_factory=list, alias="Plants")
    # Holds at most the most recent treatment
    bug_treatments: list[BugTreatmentSummary] = Field(default_factory=list, alias="BugTreatments")


class LocationDetail(LocationRead):
    plants: list[PlantWithVegetables] = Field(default_factory=list, alias="Plants")
    bug_treatments: list[BugTreatmentRead] = Field(default_factory=list, alias="BugTreatments")
