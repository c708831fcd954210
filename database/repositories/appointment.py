"""Appointment repository for database operations."""
from typing import List
from datetime import datetime

from sqlalchemy import select, and_, func

from core.exceptions import AppointmentNotFoundError
from database.models import Appointment
from database.repositories.base import BaseRepository


class AppointmentRepository(BaseRepository[Appointment]):
    """Repository for Appointment model operations."""

    model_class = Appointment
    not_found_error = AppointmentNotFoundError
    mutable_fields = Appointment.MUTABLE_FIELDS

    async def get_by_patient_name(self, patient_name: str, exact: bool = True) -> List[Appointment]:
        """
        Get appointments for a patient.

        With exact=False the name is matched as a case-insensitive substring.
        """
        query = select(Appointment).where(
            self._match(Appointment.patient_name, patient_name, exact)
        ).order_by(Appointment.date, Appointment.id)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_dentist(self, dentist: str, exact: bool = True) -> List[Appointment]:
        """Get appointments for a dentist. Same matching rules as get_by_patient_name."""
        query = select(Appointment).where(
            self._match(Appointment.dentist, dentist, exact)
        ).order_by(Appointment.date, Appointment.id)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_between(self, start: datetime, end: datetime) -> List[Appointment]:
        """Get appointments with start <= date <= end."""
        query = select(Appointment).where(
            and_(
                Appointment.date >= start,
                Appointment.date <= end
            )
        ).order_by(Appointment.date, Appointment.id)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    @staticmethod
    def _match(column, value: str, exact: bool):
        if exact:
            return column == value
        # Escape LIKE wildcards so user input matches literally
        escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return func.lower(column).like(f"%{escaped.lower()}%", escape="\\")
