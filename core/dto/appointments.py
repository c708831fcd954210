"""Appointment transfer objects."""
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppointmentDTO(BaseModel):
    """
    Externally-facing shape of an appointment.

    ``id`` is optional so the same DTO serves create requests (no id yet)
    and read responses. It is never written back to a persisted record.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="Appointment ID (assigned on create)")
    date: datetime = Field(..., description="Appointment date and time (UTC)")
    patient_name: str = Field(..., description="Patient full name")
    dentist: str = Field(..., description="Dentist name")
    procedure: str = Field(..., description="Procedure description")

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        """Convert to aware UTC. Naive values are taken to be UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
