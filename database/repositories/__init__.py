"""Database repositories package."""
from database.repositories.base import BaseRepository
from database.repositories.appointment import AppointmentRepository

__all__ = [
    "BaseRepository",
    "AppointmentRepository",
]
