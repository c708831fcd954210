"""Field mapping between persisted Appointment records and AppointmentDTO."""
from typing import Any, Dict, Iterable, List

from core.dto.appointments import AppointmentDTO
from database.models import Appointment


class AppointmentMapper:
    """Copy fields between the ORM model and the transfer object."""

    def to_dto(self, appointment: Appointment) -> AppointmentDTO:
        return AppointmentDTO.model_validate(appointment)

    def to_dtos(self, appointments: Iterable[Appointment]) -> List[AppointmentDTO]:
        return [self.to_dto(a) for a in appointments]

    def to_fields(self, dto: AppointmentDTO) -> Dict[str, Any]:
        """Mutable fields of the DTO, keyed by model attribute. The id is dropped."""
        return dto.model_dump(include=set(Appointment.MUTABLE_FIELDS))

    def to_model(self, dto: AppointmentDTO) -> Appointment:
        """Build a new transient Appointment; the database assigns its id."""
        return Appointment(**self.to_fields(dto))
