from fastapi import APIRouter

from plotbook.api.endpoints import links, locations, plants, treatments, vegetables

api_router = APIRouter()

api_router.include_router(locations.router)
api_router.include_router(plants.router)
api_router.include_router(vegetables.router)
api_router.include_router(vegetables.harvest_router)
api_router.include_router(treatments.router)
api_router.include_router(links.router)
