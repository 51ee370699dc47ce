from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plotbook.db.base import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.now,
        onupdate=datetime.now,
    )

    # Relationships
    plants: Mapped[list["Plant"]] = relationship(back_populates="location")
    bug_treatments: Mapped[list["BugTreatment"]] = relationship(
        back_populates="location",
        order_by="[BugTreatment.date.desc(), BugTreatment.id.desc()]",
    )
