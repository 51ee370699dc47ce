import logging
from typing import Any, Optional, TypeVar

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from plotbook.db.base import Base
from plotbook.schemas.base import CamelModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# SQLite INTEGER PRIMARY KEY range; larger ids cannot be bound as query parameters
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")


async def get_or_404(
    db: AsyncSession,
    model: type[ModelT],
    record_id: int,
    label: str,
    options: tuple[Any, ...] = (),
) -> ModelT:
    if not _MIN_ID <= record_id <= _MAX_ID:
        raise _not_found(label)
    record = await db.scalar(select(model).where(model.id == record_id).options(*options))
    if not record:
        raise _not_found(label)
    return record


async def ensure_exists(db: AsyncSession, model: type[Base], record_id: Optional[int], label: str) -> None:
    """404 unless ``record_id`` is None or names an existing row."""
    if record_id is None:
        return
    if not _MIN_ID <= record_id <= _MAX_ID:
        raise _not_found(label)
    found = await db.scalar(select(model.id).where(model.id == record_id))
    if found is None:
        raise _not_found(label)


def apply_update(record: Base, data: CamelModel) -> None:
    """Copy the supplied fields of ``data`` onto ``record``.

    Fields listed in ``data.keep_if_falsy`` keep their stored value when the new one is
    falsy (None, 0, ""); every other field is written whenever its key was sent.
    """
    keep_if_falsy = getattr(data, "keep_if_falsy", frozenset())
    written = []
    for field, value in data.model_dump(exclude_unset=True).items():
        if field in keep_if_falsy and not value:
            continue
        setattr(record, field, value)
        written.append(field)
    logger.debug("update %s: wrote %s", type(record).__name__, ", ".join(written) or "nothing")
