from plotbook.schemas.base import CamelModel


class PlantLocationAttach(CamelModel):
    plant_id: int
    location_id: int


class PlantLocationDetach(CamelModel):
    plant_id: int


class BugTreatmentLocationAttach(CamelModel):
    bug_treatment_id: int
    location_id: int


class BugTreatmentLocationDetach(CamelModel):
    bug_treatment_id: int
