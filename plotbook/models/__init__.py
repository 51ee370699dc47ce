from plotbook.models.location import Location
from plotbook.models.plant import Plant, Vegetable
from plotbook.models.treatment import BugTreatment

__all__ = [
    "Location",
    "Plant",
    "Vegetable",
    "BugTreatment",
]
