"""
Custom application exceptions.

Storage failures raised by SQLAlchemy are not wrapped here; they reach the
caller unchanged.
"""
from typing import Optional


class DentalAppointmentError(Exception):
    """Base exception for all application errors."""

    message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None, **kwargs):
        self.message = message or self.message
        self.details = kwargs
        super().__init__(self.message)


# ============== Lookup ==============

class NotFoundError(DentalAppointmentError):
    """Requested entity does not exist."""
    message = "Entity not found"
    entity_name: str = "Entity"

    def __init__(self, entity_id: Optional[int] = None):
        self.entity_id = entity_id
        super().__init__(
            f"{self.entity_name} #{entity_id} not found" if entity_id is not None else self.message
        )


class AppointmentNotFoundError(NotFoundError):
    """Appointment not found."""
    message = "Appointment not found"
    entity_name = "Appointment"

    @property
    def appointment_id(self) -> Optional[int]:
        return self.entity_id


# ============== Validation ==============

class ValidationError(DentalAppointmentError):
    """Data validation error."""
    message = "Validation error"

    def __init__(self, field: str, error: str):
        self.field = field
        self.error = error
        super().__init__(f"Invalid field '{field}': {error}")
