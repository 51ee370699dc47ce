import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from plotbook.models.location import Location

logger = logging.getLogger(__name__)


async def delete_location_cascade(db: AsyncSession, location: Location) -> None:
    """Delete a location together with its plants, their vegetables and its treatments.

    ``location`` must arrive with ``plants.vegetables`` and ``bug_treatments`` loaded.
    Everything is removed in a single transaction: a storage error rolls the whole
    cascade back and is re-raised.
    """
    location_id = location.id
    plants = list(location.plants)
    treatments = list(location.bug_treatments)
    vegetable_count = 0
    try:
        for plant in plants:
            for vegetable in plant.vegetables:
                await db.delete(vegetable)
                vegetable_count += 1
            await db.delete(plant)
        for treatment in treatments:
            await db.delete(treatment)
        await db.delete(location)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.warning("delete_location: rolled back cascade for location %d", location_id)
        raise

    logger.info(
        "delete_location: removed location %d with %d plants, %d vegetables, %d treatments",
        location_id,
        len(plants),
        vegetable_count,
        len(treatments),
    )
