from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from plotbook.models.plant import Vegetable

INVALID_PERIOD = "Invalid month-year format. Use MM-YYYY."


def parse_period(token: str) -> Optional[tuple[int, int]]:
    """Parse a ``MM-YYYY`` token into ``(month, year)``; None when it is not one."""
    parts = token.split("-")
    if len(parts) != 2:
        return None
    try:
        month, year = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        return None
    return month, year


def month_range(month: int, year: int) -> tuple[datetime, datetime]:
    """Start of a calendar month and start of the next one, local time (half-open range)."""
    start = datetime(year, month, 1)
    if month == 12:
        end = datetime(year + 1, 1, 1) if year < 9999 else datetime.max
    else:
        end = datetime(year, month + 1, 1)
    return start, end


async def get_monthly_harvest(db: AsyncSession, month: int, year: int) -> list[Vegetable]:
    start, end = month_range(month, year)
    result = await db.execute(
        select(Vegetable)
        .where(Vegetable.harvested_at >= start, Vegetable.harvested_at < end)
        .options(selectinload(Vegetable.plant))
        .order_by(Vegetable.harvested_at.desc(), Vegetable.id.desc())
    )
    return list(result.scalars().all())
