"""Appointment model - represents a booked dental visit."""
from datetime import datetime

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from database.base import Base
from database.types import UTCDateTime


class Appointment(Base):
    """Appointment model."""

    __tablename__ = "appointments"

    # Fields that may change after creation; id and timestamps are excluded
    MUTABLE_FIELDS = ("date", "patient_name", "dentist", "procedure")

    # Primary key (SQLite only autoincrements INTEGER PRIMARY KEY)
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True
    )

    # Appointment details
    # Stored as UTC; always loaded timezone-aware
    date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    patient_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    dentist: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    procedure: Mapped[str] = mapped_column(Text, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, date={self.date}, "
            f"patient_name='{self.patient_name}', dentist='{self.dentist}')>"
        )
