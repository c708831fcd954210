"""
Data Transfer Objects (DTOs).

This package contains Pydantic models exchanged with callers of the
service layer.
"""

from core.dto.appointments import AppointmentDTO

__all__ = [
    'AppointmentDTO',
]
