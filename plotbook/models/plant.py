from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plotbook.db.base import Base


class Plant(Base):
    __tablename__ = "plants"

    id: Mapped[int] = mapped_column(primary_key=True)
    location_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))
    planted_at: Mapped[Optional[datetime]] = mapped_column(DateTime)
    origin: Mapped[Optional[str]] = mapped_column(String(255))
    icon: Mapped[Optional[str]] = mapped_column(String(255))

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.now,
        onupdate=datetime.now,
    )

    # Relationships
    location: Mapped[Optional["Location"]] = relationship(back_populates="plants")
    vegetables: Mapped[list["Vegetable"]] = relationship(
        back_populates="plant",
        order_by="[Vegetable.harvested_at.desc(), Vegetable.id.desc()]",
    )


class Vegetable(Base):
    """One harvest record for a plant."""

    __tablename__ = "vegetables"

    id: Mapped[int] = mapped_column(primary_key=True)
    plant_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("plants.id", ondelete="SET NULL"), index=True
    )
    rating: Mapped[Optional[int]] = mapped_column(Integer)
    quantity: Mapped[Optional[int]] = mapped_column(Integer)
    harvested_at: Mapped[Optional[datetime]] = mapped_column(DateTime, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.now,
        onupdate=datetime.now,
    )

    plant: Mapped[Optional["Plant"]] = relationship(back_populates="vegetables")
