"""
Appointment service.

Accepts and returns AppointmentDTO objects, delegating storage to
AppointmentRepository. Errors from the repository (AppointmentNotFoundError,
SQLAlchemy errors) are not caught here.
"""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.dto.appointments import AppointmentDTO
from core.mapping import AppointmentMapper
from database.repositories.appointment import AppointmentRepository

logger = logging.getLogger(__name__)


class AppointmentService:
    """Service for appointment CRUD operations."""

    def __init__(
        self,
        repository: AppointmentRepository,
        mapper: Optional[AppointmentMapper] = None,
    ):
        self.repository = repository
        self.mapper = mapper or AppointmentMapper()

    @classmethod
    def from_session(cls, session: AsyncSession) -> "AppointmentService":
        """Build a service backed by a repository on the given session."""
        return cls(AppointmentRepository(session), AppointmentMapper())

    async def create_appointment(self, data: AppointmentDTO) -> AppointmentDTO:
        """
        Create appointment.

        Any id on the incoming DTO is ignored.

        Returns:
            The stored appointment, including its new id
        """
        appointment = await self.repository.create(self.mapper.to_model(data))
        logger.info(
            f"Appointment created: {appointment.id}",
            extra={"appointment_id": appointment.id, "dentist": appointment.dentist}
        )
        return self.mapper.to_dto(appointment)

    async def get_appointment_by_id(self, appointment_id: int) -> Optional[AppointmentDTO]:
        """Get appointment by ID, or None if it does not exist."""
        appointment = await self.repository.get_by_id(appointment_id)
        if appointment is None:
            return None
        return self.mapper.to_dto(appointment)

    async def get_all_appointments(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[AppointmentDTO]:
        appointments = await self.repository.get_all(limit=limit, offset=offset)
        return self.mapper.to_dtos(appointments)

    async def get_appointments_by_patient_name(
        self,
        patient_name: str,
        exact: bool = True,
    ) -> List[AppointmentDTO]:
        appointments = await self.repository.get_by_patient_name(patient_name, exact=exact)
        return self.mapper.to_dtos(appointments)

    async def get_appointments_by_dentist(
        self,
        dentist: str,
        exact: bool = True,
    ) -> List[AppointmentDTO]:
        appointments = await self.repository.get_by_dentist(dentist, exact=exact)
        return self.mapper.to_dtos(appointments)

    async def update_appointment(self, appointment_id: int, data: AppointmentDTO) -> AppointmentDTO:
        """
        Replace all mutable fields of an appointment.

        The id stays the same even if ``data.id`` differs.

        Raises:
            AppointmentNotFoundError: If appointment does not exist
        """
        appointment = await self.repository.update(appointment_id, self.mapper.to_fields(data))
        logger.info(
            f"Appointment updated: {appointment_id}",
            extra={"appointment_id": appointment_id}
        )
        return self.mapper.to_dto(appointment)

    async def delete_appointment(self, appointment_id: int) -> None:
        """
        Delete appointment.

        Raises:
            AppointmentNotFoundError: If appointment does not exist
        """
        await self.repository.delete(appointment_id)
        logger.info(
            f"Appointment deleted: {appointment_id}",
            extra={"appointment_id": appointment_id}
        )
