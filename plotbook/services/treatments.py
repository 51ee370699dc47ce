from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from plotbook.models.location import Location
from plotbook.models.treatment import BugTreatment


async def get_latest_per_location(db: AsyncSession) -> list[BugTreatment]:
    """Most recent treatment of every location that has one.

    Treatments sharing a location's latest date are ranked by id; the highest id wins.
    """
    ranked = (
        select(
            BugTreatment.id,
            func.row_number()
            .over(
                partition_by=BugTreatment.location_id,
                order_by=(BugTreatment.date.desc(), BugTreatment.id.desc()),
            )
            .label("rank"),
        )
        .where(BugTreatment.location_id.isnot(None))
        .subquery()
    )
    result = await db.execute(
        select(BugTreatment)
        .join(ranked, ranked.c.id == BugTreatment.id)
        .join(Location, BugTreatment.location_id == Location.id)
        .where(ranked.c.rank == 1)
        .options(selectinload(BugTreatment.location))
        .order_by(BugTreatment.date.desc(), BugTreatment.id.desc())
    )
    return list(result.scalars().all())
