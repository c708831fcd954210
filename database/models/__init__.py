"""Database models package."""
from database.models.appointment import Appointment

__all__ = [
    "Appointment",
]
